"""Ledger failures and their classification.

Signum nodes report a missing entity as an ordinary API error whose description reads
"Unknown <entity>"; there is no dedicated not-found code per entity type. The predicates
below are the only place that knows this wording. If a node release changes it, update
the markers here and nowhere else.
"""

from typing import Optional

UNKNOWN_TRANSACTION_MARKER = "Unknown transaction"
UNKNOWN_ACCOUNT_MARKER = "Unknown account"
UNKNOWN_ALIAS_MARKER = "Unknown alias"
UNKNOWN_CONTRACT_MARKER = "Unknown AT"
UNKNOWN_TOKEN_MARKER = "Unknown asset"


class LedgerError(Exception):
    """A Signum node rejected a request or could not be read."""

    def __init__(self, message: str, error_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.error_code = error_code


def _mentions(error: BaseException, marker: str) -> bool:
    return marker.lower() in str(error).lower()


def is_unknown_transaction(error: BaseException) -> bool:
    return _mentions(error, UNKNOWN_TRANSACTION_MARKER)


def is_unknown_account(error: BaseException) -> bool:
    return _mentions(error, UNKNOWN_ACCOUNT_MARKER)


def is_unknown_alias(error: BaseException) -> bool:
    return _mentions(error, UNKNOWN_ALIAS_MARKER)


def is_unknown_contract(error: BaseException) -> bool:
    return _mentions(error, UNKNOWN_CONTRACT_MARKER)


def is_unknown_token(error: BaseException) -> bool:
    return _mentions(error, UNKNOWN_TOKEN_MARKER)
