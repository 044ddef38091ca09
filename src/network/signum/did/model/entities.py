"""Ledger entity data consumed by the DID document builders.

Each model is a flat, already-resolved snapshot of one ledger entity. The resolver fills
them from ledger records and the optional SRC44 descriptor; builders never perform I/O.
"""

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict


class EntityData(BaseModel):
    model_config = ConfigDict(frozen=True)

    src44: Optional[Dict[str, Any]] = None


class TransactionData(EntityData):
    transaction_id: str
    sender_id: str
    sender_rs: str
    sender_public_key: str
    block_timestamp: int
    block_height: int
    confirmations: int = 0


class AccountData(EntityData):
    account_id: str
    account_rs: str
    public_key: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None


class AliasData(EntityData):
    alias_id: str
    alias_name: str
    # Top level domain the alias was requested under, "signum" when unspecified
    tld: Optional[str] = None
    # Free text on the ledger, in practice a description rather than a URI
    alias_uri: Optional[str] = None
    account_id: str
    account_rs: str
    timestamp: int


class ContractData(EntityData):
    contract_id: str
    contract_rs: str
    creator_id: str
    creator_rs: str
    creation_block: int
    creation_block_timestamp: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None


class TokenData(EntityData):
    token_id: str
    name: str
    description: Optional[str] = None
    issuer_id: str
    issuer_rs: str
    decimals: int
    # Total supply in quantity units, kept as a decimal string
    quantity: str
    timestamp: Optional[int] = None
    height: Optional[int] = None


AnyEntityData = Union[TransactionData, AccountData, AliasData, ContractData, TokenData]
