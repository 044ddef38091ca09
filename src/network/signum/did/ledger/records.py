"""Typed records for Signum node API responses.

Only the members the resolver consumes are declared; everything else a node returns is
ignored. Numeric identifiers are strings on the wire and stay strings here.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class LedgerRecord(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )


class LedgerAttachment(LedgerRecord):
    message: Optional[str] = None
    message_is_text: bool = False


class LedgerTransaction(LedgerRecord):
    transaction: str
    sender: str
    sender_rs: str = Field(alias="senderRS")
    sender_public_key: str
    block_timestamp: int
    height: int
    confirmations: Optional[int] = None
    attachment: Optional[LedgerAttachment] = None

    @property
    def text_message(self) -> Optional[str]:
        """Message attachment content, only when the sender marked it as text."""
        if self.attachment is None or not self.attachment.message_is_text:
            return None
        return self.attachment.message


class LedgerAccount(LedgerRecord):
    account: str
    account_rs: str = Field(alias="accountRS")
    public_key: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None


class LedgerAlias(LedgerRecord):
    alias: str
    alias_name: str
    alias_uri: Optional[str] = Field(default=None, alias="aliasURI")
    account: str
    account_rs: str = Field(alias="accountRS")
    timestamp: int
    tld_name: Optional[str] = None


class LedgerContract(LedgerRecord):
    at: str
    at_rs: str = Field(alias="atRS")
    creator: str
    creator_rs: str = Field(alias="creatorRS")
    creation_block: int
    name: Optional[str] = None
    description: Optional[str] = None
    # Not part of getAT, filled in from the creation transaction when available
    creation_block_timestamp: Optional[int] = None


class LedgerAsset(LedgerRecord):
    asset: str
    name: str
    description: Optional[str] = None
    account: str
    account_rs: str = Field(alias="accountRS")
    decimals: int
    quantity_qnt: str = Field(alias="quantityQNT")
    # Not part of getAsset, filled in from the issuance transaction when available
    issuance_timestamp: Optional[int] = None
    issuance_height: Optional[int] = None
