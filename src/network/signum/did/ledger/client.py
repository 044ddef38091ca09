"""Signum node API client.

Reads transactions, accounts, aliases, smart contracts (ATs) and tokens (assets) from a
Signum node over its HTTP API. The resolver only depends on the LedgerClient protocol;
SignumLedgerClient is the aiohttp implementation used by the service and the CLI.
"""

import logging
from typing import Any, Dict, Optional, Protocol, Tuple

from aiohttp import ClientSession, ClientTimeout

from network.signum.did.ledger.errors import LedgerError
from network.signum.did.ledger.records import (
    LedgerAccount,
    LedgerAlias,
    LedgerAsset,
    LedgerContract,
    LedgerTransaction,
)

logger = logging.getLogger(__name__)


class LedgerClient(Protocol):
    """Read-only view of a Signum ledger.

    Every lookup raises when the entity does not exist; the failure message then
    contains the node's "Unknown <entity>" wording (see ledger.errors). Any other
    failure propagates unchanged.
    """

    async def get_transaction(self, transaction_id: str) -> LedgerTransaction: ...

    async def get_account(self, account: str) -> LedgerAccount: ...

    async def get_alias(self, name: str, by_id: bool = False) -> LedgerAlias: ...

    async def get_contract(self, contract_id: str) -> LedgerContract: ...

    async def get_token(self, token_id: str) -> LedgerAsset: ...


class SignumLedgerClient:
    """LedgerClient backed by a Signum node's /api endpoint."""

    def __init__(
        self,
        session: ClientSession,
        node_host: str,
        timeout: Optional[ClientTimeout] = None,
    ) -> None:
        self.session = session
        self.node_host = node_host.rstrip("/")
        self.timeout = timeout

    async def request(self, request_type: str, **params: str) -> Dict[str, Any]:
        """Call a node API method and return its JSON body.

        Raises:
            LedgerError: The node answered with a non-200 status or an error body
        """
        query = {"requestType": request_type, **params}
        kwargs: Dict[str, Any] = {"params": query}
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout

        async with self.session.get(f"{self.node_host}/api", **kwargs) as resp:
            if resp.status != 200:
                raise LedgerError(
                    f"{request_type} failed with HTTP status {resp.status}"
                )
            body = await resp.json(content_type=None)

        if not isinstance(body, dict):
            raise LedgerError(f"{request_type} returned a malformed response")
        if "errorCode" in body:
            raise LedgerError(
                str(body.get("errorDescription") or f"{request_type} failed"),
                error_code=body.get("errorCode"),
            )
        return body

    async def get_transaction(self, transaction_id: str) -> LedgerTransaction:
        body = await self.request("getTransaction", transaction=transaction_id)
        return LedgerTransaction.model_validate(body)

    async def get_account(self, account: str) -> LedgerAccount:
        body = await self.request("getAccount", account=account)
        return LedgerAccount.model_validate(body)

    async def get_alias(self, name: str, by_id: bool = False) -> LedgerAlias:
        # A numeric name under an explicit tld is still a name, so the caller decides
        if by_id:
            body = await self.request("getAlias", alias=name)
        else:
            body = await self.request("getAlias", aliasName=name)
        return LedgerAlias.model_validate(body)

    async def get_contract(self, contract_id: str) -> LedgerContract:
        body = await self.request("getAT", at=contract_id)
        contract = LedgerContract.model_validate(body)
        # An AT id is the id of the transaction that created it
        created = await self._creation_block(contract_id)
        if created is None:
            return contract
        timestamp, _ = created
        return contract.model_copy(update={"creation_block_timestamp": timestamp})

    async def get_token(self, token_id: str) -> LedgerAsset:
        body = await self.request("getAsset", asset=token_id)
        asset = LedgerAsset.model_validate(body)
        # An asset id is the id of the transaction that issued it
        issued = await self._creation_block(token_id)
        if issued is None:
            return asset
        timestamp, height = issued
        return asset.model_copy(
            update={"issuance_timestamp": timestamp, "issuance_height": height}
        )

    async def _creation_block(self, transaction_id: str) -> Optional[Tuple[int, int]]:
        """Block timestamp and height of a creating transaction, None when unavailable."""
        try:
            body = await self.request("getTransaction", transaction=transaction_id)
        except LedgerError as e:
            logger.warning(
                "Creation transaction %s unavailable: %s", transaction_id, e
            )
            return None
        timestamp = body.get("blockTimestamp")
        height = body.get("height")
        if timestamp is None or height is None:
            return None
        return int(timestamp), int(height)
