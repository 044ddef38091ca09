"""
Unit tests for DID Document builders in network.signum.did.resolve.builders

Every builder is checked on mainnet and testnet, since each one derives controller and
alternate DIDs on its own.
"""

import pytest

from network.signum.did.ledger.chain_time import chain_timestamp_to_iso
from network.signum.did.model.did import (
    DID_CORE_CONTEXT,
    ED25519_2020_CONTEXT,
    VERIFICATION_METHOD_TYPE,
    DidType,
)
from network.signum.did.model.entities import (
    AccountData,
    AliasData,
    ContractData,
    TokenData,
    TransactionData,
)
from network.signum.did.resolve.builders import (
    BUILDERS,
    AccountDocumentBuilder,
    AliasDocumentBuilder,
    ContractDocumentBuilder,
    TokenDocumentBuilder,
    TransactionDocumentBuilder,
    base_document,
    build_document,
    verification_method,
)
from network.signum.did.resolve.parser import parse_did

PUBLIC_KEY = "A1B2C3D4E5F6A1B2C3D4E5F6A1B2C3D4E5F6A1B2C3D4E5F6A1B2C3D4E5F6A1B2"
SRC44 = {"vs": 1, "nm": "Described"}


def transaction_data(**overrides):
    values = dict(
        transaction_id="12345678901234567890",
        sender_id="16457748572299062825",
        sender_rs="S-9K9L-4CB5-88Y5-F5G4Z",
        sender_public_key=PUBLIC_KEY,
        block_timestamp=100000,
        block_height=123456,
        confirmations=10,
    )
    values.update(overrides)
    return TransactionData(**values)


def account_data(**overrides):
    values = dict(
        account_id="16457748572299062825",
        account_rs="S-9K9L-4CB5-88Y5-F5G4Z",
        public_key=PUBLIC_KEY,
    )
    values.update(overrides)
    return AccountData(**values)


def alias_data(**overrides):
    values = dict(
        alias_id="1234567890123456789",
        alias_name="myalias",
        account_id="16457748572299062825",
        account_rs="S-9K9L-4CB5-88Y5-F5G4Z",
        timestamp=200000,
    )
    values.update(overrides)
    return AliasData(**values)


def contract_data(**overrides):
    values = dict(
        contract_id="11223344556677889900",
        contract_rs="S-AAAA-BBBB-CCCC-DDDDD",
        creator_id="16457748572299062825",
        creator_rs="S-9K9L-4CB5-88Y5-F5G4Z",
        creation_block=500000,
        creation_block_timestamp=300000,
    )
    values.update(overrides)
    return ContractData(**values)


def token_data(**overrides):
    values = dict(
        token_id="99887766554433221100",
        name="TOKEN",
        issuer_id="16457748572299062825",
        issuer_rs="S-9K9L-4CB5-88Y5-F5G4Z",
        decimals=4,
        quantity="123456789012345678901234567890",
        timestamp=400000,
        height=654321,
    )
    values.update(overrides)
    return TokenData(**values)


class TestSharedHelpers:
    """Test suite for the shared construction helpers."""

    def test_base_document(self):
        parsed = parse_did("did:signum:tx:12345678901234567890")
        doc = base_document(parsed)
        assert doc.to_dict() == {
            "@context": [DID_CORE_CONTEXT],
            "id": "did:signum:tx:12345678901234567890",
        }

    def test_base_document_with_security(self):
        parsed = parse_did("did:signum:tx:12345678901234567890")
        doc = base_document(parsed, with_security=True)
        assert doc.context == [DID_CORE_CONTEXT, ED25519_2020_CONTEXT]

    def test_verification_method_multibase(self):
        """Test keys are lower-cased and prefixed with the base16 multibase marker."""
        method = verification_method("did:x#k", "did:x", "ABCDEF")
        assert method.to_dict() == {
            "id": "did:x#k",
            "type": VERIFICATION_METHOD_TYPE,
            "controller": "did:x",
            "publicKeyMultibase": "fabcdef",
        }

    def test_chain_timestamp_to_iso(self):
        assert chain_timestamp_to_iso(0) == "2014-08-11T02:00:00.000Z"
        assert chain_timestamp_to_iso(100000) == "2014-08-12T05:46:40.000Z"


class TestTransactionDocumentBuilder:
    """Test suite for transaction documents."""

    def test_build(self):
        parsed = parse_did("did:signum:tx:12345678901234567890")
        doc, metadata = TransactionDocumentBuilder(parsed, transaction_data()).build()

        assert doc.to_dict() == {
            "@context": [DID_CORE_CONTEXT, ED25519_2020_CONTEXT],
            "id": "did:signum:tx:12345678901234567890",
            "controller": "did:signum:acc:S-9K9L-4CB5-88Y5-F5G4Z",
            "verificationMethod": [
                {
                    "id": "did:signum:tx:12345678901234567890#creator",
                    "type": VERIFICATION_METHOD_TYPE,
                    "controller": "did:signum:acc:S-9K9L-4CB5-88Y5-F5G4Z",
                    "publicKeyMultibase": f"f{PUBLIC_KEY.lower()}",
                }
            ],
        }
        assert metadata.to_dict() == {
            "created": "2014-08-12T05:46:40.000Z",
            "blockHeight": 123456,
            "confirmations": 10,
            "immutable": True,
        }

    def test_build_testnet(self):
        parsed = parse_did("did:signum:testnet:tx:12345678901234567890")
        doc, _ = TransactionDocumentBuilder(
            parsed, transaction_data(sender_rs="TS-9K9L-4CB5-88Y5-F5G4Z")
        ).build()
        assert doc.controller == "did:signum:testnet:acc:TS-9K9L-4CB5-88Y5-F5G4Z"
        assert doc.verification_method[0].controller == doc.controller
        assert doc.verification_method[0].id == (
            "did:signum:testnet:tx:12345678901234567890#creator"
        )

    def test_build_with_src44(self):
        parsed = parse_did("did:signum:tx:12345678901234567890")
        doc, _ = TransactionDocumentBuilder(
            parsed, transaction_data(src44=SRC44)
        ).build()
        assert doc.src44 == SRC44
        assert doc.to_dict()["src44"] == SRC44


class TestAccountDocumentBuilder:
    """Test suite for account documents."""

    def test_build_by_address(self):
        """Test an address DID lists the numeric DID as alternate."""
        parsed = parse_did("did:signum:acc:S-9K9L-4CB5-88Y5-F5G4Z")
        doc, metadata = AccountDocumentBuilder(parsed, account_data()).build()

        assert doc.also_known_as == ["did:signum:acc:16457748572299062825"]
        assert doc.context == [DID_CORE_CONTEXT, ED25519_2020_CONTEXT]
        assert doc.verification_method[0].id == (
            "did:signum:acc:S-9K9L-4CB5-88Y5-F5G4Z#key-1"
        )
        assert doc.verification_method[0].controller == parsed.did
        assert doc.authentication == [doc.verification_method[0].id]
        assert doc.controller is None
        assert metadata.to_dict() == {"immutable": False}

    def test_build_by_numeric_id(self):
        """Test a numeric DID lists the address DID as alternate."""
        parsed = parse_did("did:signum:acc:16457748572299062825")
        doc, _ = AccountDocumentBuilder(parsed, account_data()).build()
        assert doc.also_known_as == ["did:signum:acc:S-9K9L-4CB5-88Y5-F5G4Z"]

    def test_build_testnet(self):
        parsed = parse_did("did:signum:testnet:acc:TS-9K9L-4CB5-88Y5-F5G4Z")
        doc, _ = AccountDocumentBuilder(
            parsed, account_data(account_rs="TS-9K9L-4CB5-88Y5-F5G4Z")
        ).build()
        assert doc.also_known_as == ["did:signum:testnet:acc:16457748572299062825"]

    def test_build_testnet_by_numeric_id(self):
        parsed = parse_did("did:signum:testnet:acc:16457748572299062825")
        doc, _ = AccountDocumentBuilder(
            parsed, account_data(account_rs="TS-9K9L-4CB5-88Y5-F5G4Z")
        ).build()
        assert doc.also_known_as == [
            "did:signum:testnet:acc:TS-9K9L-4CB5-88Y5-F5G4Z"
        ]

    def test_build_without_public_key(self):
        """Test accounts without a key get no key material and no security context."""
        parsed = parse_did("did:signum:acc:S-9K9L-4CB5-88Y5-F5G4Z")
        doc, _ = AccountDocumentBuilder(parsed, account_data(public_key=None)).build()

        serialized = doc.to_dict()
        assert serialized["@context"] == [DID_CORE_CONTEXT]
        assert "verificationMethod" not in serialized
        assert "authentication" not in serialized

    def test_build_with_src44(self):
        parsed = parse_did("did:signum:acc:S-9K9L-4CB5-88Y5-F5G4Z")
        doc, _ = AccountDocumentBuilder(parsed, account_data(src44=SRC44)).build()
        assert doc.src44 == SRC44

    def test_build_without_src44(self):
        parsed = parse_did("did:signum:acc:S-9K9L-4CB5-88Y5-F5G4Z")
        doc, _ = AccountDocumentBuilder(parsed, account_data()).build()
        assert "src44" not in doc.to_dict()


class TestAliasDocumentBuilder:
    """Test suite for alias documents."""

    def test_build_by_name(self):
        """Test a name DID lists the numeric DID as alternate."""
        parsed = parse_did("did:signum:alias:myalias")
        doc, metadata = AliasDocumentBuilder(
            parsed, alias_data(tld="signum")
        ).build()

        assert doc.also_known_as == ["did:signum:alias:1234567890123456789"]
        assert doc.controller == "did:signum:acc:S-9K9L-4CB5-88Y5-F5G4Z"
        assert doc.verification_method is None
        assert metadata.to_dict() == {
            "created": chain_timestamp_to_iso(200000),
            "immutable": False,
        }

    def test_build_by_numeric_id_defaults_tld(self):
        """Test a numeric DID lists the tld:name DID, tld defaulting to signum."""
        parsed = parse_did("did:signum:alias:1234567890123456789")
        doc, _ = AliasDocumentBuilder(parsed, alias_data()).build()
        assert doc.also_known_as == ["did:signum:alias:signum:myalias"]

    def test_build_by_numeric_id_custom_tld(self):
        parsed = parse_did("did:signum:alias:1234567890123456789")
        doc, _ = AliasDocumentBuilder(parsed, alias_data(tld="mytld")).build()
        assert doc.also_known_as == ["did:signum:alias:mytld:myalias"]

    def test_build_testnet(self):
        parsed = parse_did("did:signum:testnet:alias:1234567890123456789")
        doc, _ = AliasDocumentBuilder(
            parsed, alias_data(account_rs="TS-9K9L-4CB5-88Y5-F5G4Z")
        ).build()
        assert doc.also_known_as == ["did:signum:testnet:alias:signum:myalias"]
        assert doc.controller == "did:signum:testnet:acc:TS-9K9L-4CB5-88Y5-F5G4Z"

    def test_alias_uri_is_never_a_service(self):
        """Test the alias URI text only surfaces through src44."""
        parsed = parse_did("did:signum:alias:myalias")
        doc, _ = AliasDocumentBuilder(
            parsed, alias_data(alias_uri="https://example.com", src44=SRC44)
        ).build()
        assert doc.service is None
        assert doc.src44 == SRC44


class TestContractDocumentBuilder:
    """Test suite for contract documents."""

    def test_build(self):
        parsed = parse_did("did:signum:contract:11223344556677889900")
        doc, metadata = ContractDocumentBuilder(parsed, contract_data()).build()

        assert doc.controller == "did:signum:acc:S-9K9L-4CB5-88Y5-F5G4Z"
        assert doc.also_known_as == ["did:signum:contract:S-AAAA-BBBB-CCCC-DDDDD"]
        assert metadata.to_dict() == {
            "created": chain_timestamp_to_iso(300000),
            "blockHeight": 500000,
            "immutable": False,
        }

    def test_build_testnet(self):
        parsed = parse_did("did:signum:testnet:contract:11223344556677889900")
        doc, _ = ContractDocumentBuilder(
            parsed,
            contract_data(
                contract_rs="TS-AAAA-BBBB-CCCC-DDDDD",
                creator_rs="TS-9K9L-4CB5-88Y5-F5G4Z",
            ),
        ).build()
        assert doc.controller == "did:signum:testnet:acc:TS-9K9L-4CB5-88Y5-F5G4Z"
        assert doc.also_known_as == [
            "did:signum:testnet:contract:TS-AAAA-BBBB-CCCC-DDDDD"
        ]

    def test_unknown_creation_time_is_omitted(self):
        """Test a missing creation timestamp leaves created out instead of zero."""
        parsed = parse_did("did:signum:contract:11223344556677889900")
        _, metadata = ContractDocumentBuilder(
            parsed, contract_data(creation_block_timestamp=None)
        ).build()
        assert "created" not in metadata.to_dict()
        assert metadata.block_height == 500000

    def test_build_with_src44(self):
        parsed = parse_did("did:signum:contract:11223344556677889900")
        doc, _ = ContractDocumentBuilder(parsed, contract_data(src44=SRC44)).build()
        assert doc.src44 == SRC44


class TestTokenDocumentBuilder:
    """Test suite for token documents."""

    def test_build(self):
        parsed = parse_did("did:signum:token:99887766554433221100")
        doc, metadata = TokenDocumentBuilder(parsed, token_data()).build()

        assert doc.controller == "did:signum:acc:S-9K9L-4CB5-88Y5-F5G4Z"
        assert doc.to_dict()["service"] == [
            {
                "id": "did:signum:token:99887766554433221100#token-info",
                "type": "TokenService",
                "serviceEndpoint": {
                    "name": "TOKEN",
                    "decimals": 4,
                    "totalSupply": "123456789012345678901234567890",
                },
            }
        ]
        assert metadata.to_dict() == {
            "created": chain_timestamp_to_iso(400000),
            "blockHeight": 654321,
            "immutable": True,
        }

    def test_total_supply_stays_a_string(self):
        parsed = parse_did("did:signum:token:99887766554433221100")
        doc, _ = TokenDocumentBuilder(parsed, token_data()).build()
        total_supply = doc.service[0].service_endpoint["totalSupply"]
        assert isinstance(total_supply, str)

    def test_build_testnet(self):
        parsed = parse_did("did:signum:testnet:token:99887766554433221100")
        doc, _ = TokenDocumentBuilder(
            parsed, token_data(issuer_rs="TS-9K9L-4CB5-88Y5-F5G4Z")
        ).build()
        assert doc.controller == "did:signum:testnet:acc:TS-9K9L-4CB5-88Y5-F5G4Z"
        assert doc.service[0].id == (
            "did:signum:testnet:token:99887766554433221100#token-info"
        )

    def test_unknown_issuance_is_omitted(self):
        parsed = parse_did("did:signum:token:99887766554433221100")
        _, metadata = TokenDocumentBuilder(
            parsed, token_data(timestamp=None, height=None)
        ).build()
        assert metadata.to_dict() == {"immutable": True}


class TestBuildDocument:
    """Test suite for builder dispatch."""

    def test_every_type_has_a_builder(self):
        assert set(BUILDERS) == set(DidType)

    @pytest.mark.parametrize(
        "did,data,immutable",
        [
            ("did:signum:tx:12345678901234567890", transaction_data(), True),
            ("did:signum:acc:S-9K9L-4CB5-88Y5-F5G4Z", account_data(), False),
            ("did:signum:alias:myalias", alias_data(), False),
            ("did:signum:contract:11223344556677889900", contract_data(), False),
            ("did:signum:token:99887766554433221100", token_data(), True),
        ],
    )
    def test_dispatch_and_immutability(self, did, data, immutable):
        """Test dispatch by type and that immutability depends on the type only."""
        doc, metadata = build_document(parse_did(did), data)
        assert doc.id == did
        assert metadata.immutable is immutable

    def test_mismatched_data_is_rejected(self):
        with pytest.raises(TypeError):
            build_document(parse_did("did:signum:tx:12345678901234567890"), account_data())

    def test_builders_are_deterministic(self):
        parsed = parse_did("did:signum:acc:S-9K9L-4CB5-88Y5-F5G4Z")
        first = AccountDocumentBuilder(parsed, account_data()).build()
        second = AccountDocumentBuilder(parsed, account_data()).build()
        assert first[0].to_dict() == second[0].to_dict()
        assert first[1].to_dict() == second[1].to_dict()
