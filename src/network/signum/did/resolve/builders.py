"""DID Document builders, one per ledger entity type.

Each builder is constructed with the parsed DID and the entity data the resolver fetched
for it, and `build()` returns the DID Document together with its document metadata.
Builders are pure: no I/O, no hidden state, the same input always yields the same output.

Shared pieces (base document, verification method) are plain functions that every
builder composes. Derived DIDs (controllers, alternate forms) are always produced with
the network of the requested DID, so mainnet DIDs never carry a network segment and
testnet DIDs always do.
"""

from typing import Dict, Tuple, Type, Union

from network.signum.did.ledger.chain_time import chain_timestamp_to_iso
from network.signum.did.model.did import (
    DID_CORE_CONTEXT,
    ED25519_2020_CONTEXT,
    DidDocument,
    DidDocumentMetadata,
    DidType,
    ParsedDid,
    Service,
    VerificationMethod,
)
from network.signum.did.model.entities import (
    AccountData,
    AliasData,
    AnyEntityData,
    ContractData,
    TokenData,
    TransactionData,
)
from network.signum.did.resolve.parser import (
    DEFAULT_ALIAS_TLD,
    build_did,
    is_account_address,
    is_numeric_id,
)

TOKEN_SERVICE_TYPE = "TokenService"

BuildResult = Tuple[DidDocument, DidDocumentMetadata]


def base_document(parsed: ParsedDid, with_security: bool = False) -> DidDocument:
    """Document skeleton: DID core context and the requested DID as id.

    The Ed25519 2020 security suite context is added for documents that carry a key.
    """
    context = [DID_CORE_CONTEXT]
    if with_security:
        context.append(ED25519_2020_CONTEXT)
    return DidDocument(context=context, id=parsed.did)


def verification_method(
    method_id: str, controller: str, public_key_hex: str
) -> VerificationMethod:
    # multibase "f" marks base16 lower case
    return VerificationMethod(
        id=method_id,
        controller=controller,
        public_key_multibase=f"f{public_key_hex.lower()}",
    )


class TransactionDocumentBuilder:
    """Transactions are controlled by their sender and never change once confirmed."""

    def __init__(self, parsed: ParsedDid, data: TransactionData) -> None:
        self.parsed = parsed
        self.data = data

    def build(self) -> BuildResult:
        doc = base_document(self.parsed, with_security=True)

        controller = build_did(DidType.acc, self.data.sender_rs, self.parsed.network)
        doc.controller = controller
        doc.verification_method = [
            verification_method(
                f"{self.parsed.did}#creator", controller, self.data.sender_public_key
            )
        ]

        if self.data.src44 is not None:
            doc.src44 = self.data.src44

        metadata = DidDocumentMetadata(
            created=chain_timestamp_to_iso(self.data.block_timestamp),
            block_height=self.data.block_height,
            confirmations=self.data.confirmations,
            immutable=True,
        )
        return doc, metadata


class AccountDocumentBuilder:
    """Accounts list their other address form and authenticate with their public key.

    Accounts that never published a public key get neither a verification method nor
    an authentication entry. Account metadata can be changed by its owner.
    """

    def __init__(self, parsed: ParsedDid, data: AccountData) -> None:
        self.parsed = parsed
        self.data = data

    def build(self) -> BuildResult:
        network = self.parsed.network
        doc = base_document(self.parsed, with_security=bool(self.data.public_key))

        if is_account_address(self.parsed.identifier):
            doc.also_known_as = [build_did(DidType.acc, self.data.account_id, network)]
        else:
            doc.also_known_as = [build_did(DidType.acc, self.data.account_rs, network)]

        if self.data.public_key:
            key_id = f"{self.parsed.did}#key-1"
            doc.verification_method = [
                verification_method(key_id, self.parsed.did, self.data.public_key)
            ]
            doc.authentication = [key_id]

        if self.data.src44 is not None:
            doc.src44 = self.data.src44

        return doc, DidDocumentMetadata(immutable=False)


class AliasDocumentBuilder:
    """Aliases are controlled by their owner, who can update or transfer them.

    The alias URI field holds free text (in practice a description). It is only ever
    surfaced through the SRC44 descriptor, never as a service endpoint.
    """

    def __init__(self, parsed: ParsedDid, data: AliasData) -> None:
        self.parsed = parsed
        self.data = data

    def build(self) -> BuildResult:
        network = self.parsed.network
        doc = base_document(self.parsed)

        if is_numeric_id(self.parsed.identifier):
            tld = self.data.tld or DEFAULT_ALIAS_TLD
            doc.also_known_as = [
                build_did(DidType.alias, f"{tld}:{self.data.alias_name}", network)
            ]
        else:
            doc.also_known_as = [build_did(DidType.alias, self.data.alias_id, network)]

        doc.controller = build_did(DidType.acc, self.data.account_rs, network)

        if self.data.src44 is not None:
            doc.src44 = self.data.src44

        metadata = DidDocumentMetadata(
            created=chain_timestamp_to_iso(self.data.timestamp),
            immutable=False,
        )
        return doc, metadata


class ContractDocumentBuilder:
    """Smart contracts are controlled by their creator.

    The contract code is fixed, but its descriptive metadata is not, so contract
    documents are mutable.
    """

    def __init__(self, parsed: ParsedDid, data: ContractData) -> None:
        self.parsed = parsed
        self.data = data

    def build(self) -> BuildResult:
        network = self.parsed.network
        doc = base_document(self.parsed)

        doc.controller = build_did(DidType.acc, self.data.creator_rs, network)
        doc.also_known_as = [
            build_did(DidType.contract, self.data.contract_rs, network)
        ]

        if self.data.src44 is not None:
            doc.src44 = self.data.src44

        created = None
        if self.data.creation_block_timestamp is not None:
            created = chain_timestamp_to_iso(self.data.creation_block_timestamp)
        metadata = DidDocumentMetadata(
            created=created,
            block_height=self.data.creation_block,
            immutable=False,
        )
        return doc, metadata


class TokenDocumentBuilder:
    """Tokens are controlled by their issuer and fixed at issuance."""

    def __init__(self, parsed: ParsedDid, data: TokenData) -> None:
        self.parsed = parsed
        self.data = data

    def build(self) -> BuildResult:
        doc = base_document(self.parsed)

        doc.controller = build_did(
            DidType.acc, self.data.issuer_rs, self.parsed.network
        )
        doc.service = [
            Service(
                id=f"{self.parsed.did}#token-info",
                type=TOKEN_SERVICE_TYPE,
                service_endpoint={
                    "name": self.data.name,
                    "decimals": self.data.decimals,
                    "totalSupply": self.data.quantity,
                },
            )
        ]

        if self.data.src44 is not None:
            doc.src44 = self.data.src44

        created = None
        if self.data.timestamp is not None:
            created = chain_timestamp_to_iso(self.data.timestamp)
        metadata = DidDocumentMetadata(
            created=created,
            block_height=self.data.height,
            immutable=True,
        )
        return doc, metadata


AnyDocumentBuilder = Union[
    TransactionDocumentBuilder,
    AccountDocumentBuilder,
    AliasDocumentBuilder,
    ContractDocumentBuilder,
    TokenDocumentBuilder,
]

BUILDERS: Dict[DidType, Type[AnyDocumentBuilder]] = {
    DidType.tx: TransactionDocumentBuilder,
    DidType.acc: AccountDocumentBuilder,
    DidType.alias: AliasDocumentBuilder,
    DidType.contract: ContractDocumentBuilder,
    DidType.token: TokenDocumentBuilder,
}

ENTITY_DATA: Dict[DidType, type] = {
    DidType.tx: TransactionData,
    DidType.acc: AccountData,
    DidType.alias: AliasData,
    DidType.contract: ContractData,
    DidType.token: TokenData,
}


def build_document(parsed: ParsedDid, data: AnyEntityData) -> BuildResult:
    """Build the document for `parsed` with the builder registered for its type.

    Raises:
        TypeError: If `data` is not the entity data for the DID's type
    """
    expected = ENTITY_DATA[parsed.type]
    if not isinstance(data, expected):
        raise TypeError(
            f"{parsed.type} documents are built from {expected.__name__}, "
            f"got {type(data).__name__}"
        )
    builder = BUILDERS[parsed.type](parsed, data)  # type: ignore[arg-type]
    return builder.build()
