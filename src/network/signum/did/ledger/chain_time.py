from datetime import datetime, timedelta, timezone

# Signum block timestamps count seconds from the genesis block
GENESIS_EPOCH = datetime(2014, 8, 11, 2, 0, 0, tzinfo=timezone.utc)


def chain_timestamp_to_datetime(timestamp: int) -> datetime:
    return GENESIS_EPOCH + timedelta(seconds=timestamp)


def chain_timestamp_to_iso(timestamp: int) -> str:
    """Render a chain timestamp as ISO-8601 UTC, e.g. 2014-08-12T05:46:40.000Z."""
    moment = chain_timestamp_to_datetime(timestamp)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
