"""
Shared test configuration and fixtures for resolver tests.

Provides node-shaped ledger payloads, typed ledger records built from them, and a mocked
ledger client so resolver and HTTP tests never reach a real Signum node.
"""

import json
from unittest.mock import AsyncMock

import pytest

from network.signum.did.ledger.client import SignumLedgerClient
from network.signum.did.ledger.records import (
    LedgerAccount,
    LedgerAlias,
    LedgerAsset,
    LedgerContract,
    LedgerTransaction,
)

SENDER_PUBLIC_KEY = "A1B2C3D4E5F6A1B2C3D4E5F6A1B2C3D4E5F6A1B2C3D4E5F6A1B2C3D4E5F6A1B2"
ACCOUNT_PUBLIC_KEY = "497D559D18D989B8E2D729EB6F69B70C1DDC3E554F75BEF3ED2716A4B2121902"

SRC44_DESCRIPTOR = {
    "vs": 1,
    "nm": "Test Product",
    "ds": "Product description",
    "xbn": "BATCH-001",
    "xmd": "2025-01-01",
}


def transaction_payload(**overrides):
    payload = {
        "transaction": "12345678901234567890",
        "sender": "16457748572299062825",
        "senderRS": "S-9K9L-4CB5-88Y5-F5G4Z",
        "senderPublicKey": SENDER_PUBLIC_KEY,
        "blockTimestamp": 100000,
        "height": 123456,
        "confirmations": 10,
        "attachment": {},
    }
    payload.update(overrides)
    return payload


def account_payload(**overrides):
    payload = {
        "account": "16457748572299062825",
        "accountRS": "S-9K9L-4CB5-88Y5-F5G4Z",
        "publicKey": ACCOUNT_PUBLIC_KEY,
        "name": "Test Account",
        "description": "Account description",
    }
    payload.update(overrides)
    return payload


def alias_payload(**overrides):
    payload = {
        "alias": "1234567890123456789",
        "aliasName": "myalias",
        "aliasURI": "Just a description",
        "account": "16457748572299062825",
        "accountRS": "S-9K9L-4CB5-88Y5-F5G4Z",
        "timestamp": 200000,
        "tldName": "signum",
    }
    payload.update(overrides)
    return payload


def contract_payload(**overrides):
    payload = {
        "at": "11223344556677889900",
        "atRS": "S-AAAA-BBBB-CCCC-DDDDD",
        "creator": "16457748572299062825",
        "creatorRS": "S-9K9L-4CB5-88Y5-F5G4Z",
        "creationBlock": 500000,
        "name": "MyContract",
        "description": "Contract description",
    }
    payload.update(overrides)
    return payload


def asset_payload(**overrides):
    payload = {
        "asset": "99887766554433221100",
        "name": "TOKEN",
        "description": "Token description",
        "account": "16457748572299062825",
        "accountRS": "S-9K9L-4CB5-88Y5-F5G4Z",
        "decimals": 4,
        "quantityQNT": "123456789012345678901234567890",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def ledger():
    """Ledger client double with every lookup as an AsyncMock."""
    return AsyncMock(spec=SignumLedgerClient)


@pytest.fixture
def transaction():
    return LedgerTransaction.model_validate(transaction_payload())


@pytest.fixture
def transaction_with_src44():
    return LedgerTransaction.model_validate(
        transaction_payload(
            attachment={
                "version.Message": 1,
                "message": json.dumps(SRC44_DESCRIPTOR),
                "messageIsText": True,
            }
        )
    )


@pytest.fixture
def account():
    return LedgerAccount.model_validate(account_payload())


@pytest.fixture
def alias():
    return LedgerAlias.model_validate(alias_payload())


@pytest.fixture
def contract():
    return LedgerContract.model_validate(contract_payload()).model_copy(
        update={"creation_block_timestamp": 300000}
    )


@pytest.fixture
def asset():
    return LedgerAsset.model_validate(asset_payload()).model_copy(
        update={"issuance_timestamp": 400000, "issuance_height": 654321}
    )
