"""did:signum resolution.

SignumDidResolver ties the pipeline together for a single DID:

1. Parse the identifier; failures become invalidDid results
2. Route on the entity type to the matching ledger lookup
3. Classify lookup failures as notFound (the entity does not exist) or internalError
4. Scan the entity's free-text field for an SRC44 descriptor
5. Build the DID Document and document metadata

`resolve()` always returns a ResolutionResult and never raises.
"""

import logging
from typing import Awaitable, Callable, Dict

import sentry_sdk

from network.signum.did.ledger.client import LedgerClient
from network.signum.did.ledger.errors import (
    is_unknown_account,
    is_unknown_alias,
    is_unknown_contract,
    is_unknown_token,
    is_unknown_transaction,
)
from network.signum.did.model.did import (
    DidType,
    ParsedDid,
    ResolutionError,
    ResolutionResult,
)
from network.signum.did.model.entities import (
    AccountData,
    AliasData,
    AnyEntityData,
    ContractData,
    TokenData,
    TransactionData,
)
from network.signum.did.resolve.builders import build_document
from network.signum.did.resolve.descriptor import extract_descriptor
from network.signum.did.resolve.parser import (
    DidParseError,
    is_numeric_id,
    parse_did,
    split_alias,
)

logger = logging.getLogger(__name__)

Route = Callable[[ParsedDid], Awaitable[ResolutionResult]]


class SignumDidResolver:
    """Resolves did:signum DIDs against one Signum ledger."""

    def __init__(self, ledger: LedgerClient) -> None:
        self.ledger = ledger
        self.routes: Dict[DidType, Route] = {
            DidType.tx: self._resolve_transaction,
            DidType.acc: self._resolve_account,
            DidType.alias: self._resolve_alias,
            DidType.contract: self._resolve_contract,
            DidType.token: self._resolve_token,
        }

    async def resolve(self, did: str) -> ResolutionResult:
        try:
            parsed = parse_did(did)
        except DidParseError as e:
            return ResolutionResult.failed(ResolutionError.invalid_did, e.message)

        route = self.routes.get(parsed.type)
        if route is None:
            return ResolutionResult.failed(
                ResolutionError.method_not_supported,
                f"DID type '{parsed.type}' not supported",
            )

        try:
            return await route(parsed)
        except Exception as e:
            logger.exception("Failed to resolve %s", parsed.did)
            sentry_sdk.capture_exception(e)
            return ResolutionResult.failed(
                ResolutionError.internal_error, str(e) or type(e).__name__
            )

    async def _resolve_transaction(self, parsed: ParsedDid) -> ResolutionResult:
        try:
            tx = await self.ledger.get_transaction(parsed.identifier)
        except Exception as e:
            if is_unknown_transaction(e):
                return not_found("Transaction", parsed)
            raise

        data = TransactionData(
            transaction_id=tx.transaction,
            sender_id=tx.sender,
            sender_rs=tx.sender_rs,
            sender_public_key=tx.sender_public_key,
            block_timestamp=tx.block_timestamp,
            block_height=tx.height,
            confirmations=tx.confirmations or 0,
            src44=extract_descriptor(tx.text_message),
        )
        return resolved(parsed, data)

    async def _resolve_account(self, parsed: ParsedDid) -> ResolutionResult:
        try:
            account = await self.ledger.get_account(parsed.identifier)
        except Exception as e:
            if is_unknown_account(e):
                return not_found("Account", parsed)
            raise

        data = AccountData(
            account_id=account.account,
            account_rs=account.account_rs,
            public_key=account.public_key,
            name=account.name,
            description=account.description,
            src44=extract_descriptor(account.description),
        )
        return resolved(parsed, data)

    async def _resolve_alias(self, parsed: ParsedDid) -> ResolutionResult:
        # The tld only matters for the DID round trip, the ledger is queried by name
        # or, for the bare numeric form, by alias id
        by_id = is_numeric_id(parsed.identifier)
        tld, name = split_alias(parsed.identifier)
        try:
            alias = await self.ledger.get_alias(name, by_id=by_id)
        except Exception as e:
            if is_unknown_alias(e):
                return not_found("Alias", parsed)
            raise

        # A numeric DID names no tld, so the alternate form uses the ledger's
        if by_id:
            tld = alias.tld_name

        data = AliasData(
            alias_id=alias.alias,
            alias_name=alias.alias_name,
            tld=tld,
            alias_uri=alias.alias_uri,
            account_id=alias.account,
            account_rs=alias.account_rs,
            timestamp=alias.timestamp,
            src44=extract_descriptor(alias.alias_uri),
        )
        return resolved(parsed, data)

    async def _resolve_contract(self, parsed: ParsedDid) -> ResolutionResult:
        try:
            contract = await self.ledger.get_contract(parsed.identifier)
        except Exception as e:
            if is_unknown_contract(e):
                return not_found("Contract", parsed)
            raise

        data = ContractData(
            contract_id=contract.at,
            contract_rs=contract.at_rs,
            creator_id=contract.creator,
            creator_rs=contract.creator_rs,
            creation_block=contract.creation_block,
            creation_block_timestamp=contract.creation_block_timestamp,
            name=contract.name,
            description=contract.description,
            src44=extract_descriptor(contract.description),
        )
        return resolved(parsed, data)

    async def _resolve_token(self, parsed: ParsedDid) -> ResolutionResult:
        try:
            asset = await self.ledger.get_token(parsed.identifier)
        except Exception as e:
            if is_unknown_token(e):
                return not_found("Token", parsed)
            raise

        data = TokenData(
            token_id=asset.asset,
            name=asset.name,
            description=asset.description,
            issuer_id=asset.account,
            issuer_rs=asset.account_rs,
            decimals=asset.decimals,
            quantity=asset.quantity_qnt,
            timestamp=asset.issuance_timestamp,
            height=asset.issuance_height,
            src44=extract_descriptor(asset.description),
        )
        return resolved(parsed, data)


def resolved(parsed: ParsedDid, data: AnyEntityData) -> ResolutionResult:
    document, metadata = build_document(parsed, data)
    return ResolutionResult.resolved(document, metadata)


def not_found(label: str, parsed: ParsedDid) -> ResolutionResult:
    return ResolutionResult.failed(
        ResolutionError.not_found, f"{label} {parsed.identifier} not found"
    )
