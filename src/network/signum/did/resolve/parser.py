"""did:signum identifier grammar.

Parses and validates identifiers of the form

    did:signum:[network:]<type>:<identifier>

where the network segment is optional (mainnet when absent) and the identifier must
satisfy a grammar that depends on the entity type. Parsing is all or nothing: either a
complete ParsedDid is returned or DidParseError is raised.
"""

import re
from typing import Optional, Tuple

from network.signum.did.model.did import DID_METHOD, DidType, Network, ParsedDid

DEFAULT_ALIAS_TLD = "signum"

DID_PATTERN = re.compile(
    r"^did:signum:(?:(?P<network>mainnet|testnet|stagenet):)?"
    r"(?P<type>tx|acc|alias|contract|token):(?P<identifier>\S+)$",
    re.ASCII,
)

# ASCII only: \d and \w would otherwise accept any Unicode digit or letter
NUMERIC_ID = re.compile(r"^\d{10,24}$", re.ASCII)
ACCOUNT_ID = re.compile(r"^\d{18,23}$", re.ASCII)
ACCOUNT_ADDRESS = re.compile(
    r"^T?S-[A-Z0-9]{4}-[A-Z0-9]{4}-[A-Z0-9]{4}-[A-Z0-9]{5}$", re.IGNORECASE | re.ASCII
)
ALIAS_NAME = re.compile(r"^(?:\w{1,100}:)?\w{1,100}$", re.ASCII)


class DidParseError(ValueError):
    """Raised when a string is not a valid did:signum identifier."""

    def __init__(self, message: str, did: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.did = did


def parse_did(did: str) -> ParsedDid:
    """Parse a did:signum identifier into its components.

    Args:
        did: Raw identifier, surrounding whitespace is ignored

    Returns:
        ParsedDid with the network defaulted to mainnet

    Raises:
        DidParseError: If the identifier is empty, malformed, names an unsupported
            network or fails the type-specific identifier grammar
    """
    trimmed = (did or "").strip()

    if not trimmed:
        raise DidParseError("DID must be a non-empty string", did)

    if not trimmed.startswith("did:"):
        raise DidParseError('DID must start with "did:"', trimmed)

    match = DID_PATTERN.match(trimmed)
    if match is None:
        raise DidParseError(
            "Invalid Signum DID format. Expected: did:signum:[network]:[type]:[identifier]",
            trimmed,
        )

    network_value = match.group("network") or Network.mainnet.value
    if network_value not in Network.__members__:
        raise DidParseError(f"Invalid network: {network_value}", trimmed)

    did_type = DidType(match.group("type"))
    identifier = match.group("identifier")
    validate_identifier(did_type, identifier, trimmed)

    return ParsedDid(
        did=trimmed,
        method=DID_METHOD,
        network=Network(network_value),
        type=did_type,
        identifier=identifier,
    )


def is_valid_did(did: str) -> bool:
    try:
        parse_did(did)
    except DidParseError:
        return False
    return True


def build_did(
    did_type: DidType, identifier: str, network: Network = Network.mainnet
) -> str:
    """Build the canonical DID for an entity.

    The network segment is only written for networks other than mainnet.
    """
    if network == Network.mainnet:
        return f"did:{DID_METHOD}:{did_type}:{identifier}"
    return f"did:{DID_METHOD}:{network}:{did_type}:{identifier}"


def validate_identifier(did_type: DidType, identifier: str, did: str) -> None:
    if did_type in (DidType.tx, DidType.contract, DidType.token):
        if not NUMERIC_ID.match(identifier):
            raise DidParseError(
                f"Invalid {did_type} identifier. Must be 18-23 digit numeric ID", did
            )
    elif did_type == DidType.acc:
        if not (is_numeric_id(identifier) or is_account_address(identifier)):
            raise DidParseError(
                "Invalid account identifier. Must be numeric ID or RS-address "
                "(S-XXXX-XXXX-XXXX-XXXXX)",
                did,
            )
    elif did_type == DidType.alias:
        if not (is_numeric_id(identifier) or ALIAS_NAME.match(identifier)):
            raise DidParseError(
                "Invalid alias identifier. Must be numeric ID or [tld:]name format",
                did,
            )
    else:
        raise DidParseError(f"Unknown type: {did_type}", did)


def is_numeric_id(identifier: str) -> bool:
    """True for the 18-23 digit numeric form of account and alias identifiers."""
    return ACCOUNT_ID.match(identifier) is not None


def is_account_address(identifier: str) -> bool:
    """True for the S-XXXX-XXXX-XXXX-XXXXX (testnet TS-...) address form."""
    return ACCOUNT_ADDRESS.match(identifier) is not None


def split_alias(identifier: str) -> Tuple[str, str]:
    """Split an alias identifier into (tld, name).

    Exactly one colon separates tld and name; otherwise the whole identifier is the
    name and the tld is the default one.
    """
    if identifier.count(":") == 1:
        tld, name = identifier.split(":")
        return tld, name
    return DEFAULT_ALIAS_TLD, identifier
