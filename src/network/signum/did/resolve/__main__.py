from typing import Dict, List
import argparse
import asyncio
import json
import logging

import aiohttp

from network.signum.did.ledger.client import SignumLedgerClient
from network.signum.did.model.did import Network
from network.signum.did.resolve.parser import DidParseError, parse_did
from network.signum.did.resolve.resolver import SignumDidResolver

logger = logging.getLogger(__name__)


async def realMain() -> None:
    parser = argparse.ArgumentParser(
        prog="resolve", description="Resolve did:signum DIDs"
    )
    parser.add_argument("did", nargs="+", help="The DID(s) to resolve.")
    parser.add_argument(
        "--mainnet-node",
        default="https://europe.signum.network",
        help="The Signum node to use for mainnet DIDs.",
    )
    parser.add_argument(
        "--testnet-node",
        default="https://europe3.testnet.signum.network",
        help="The Signum node to use for testnet DIDs.",
    )

    args = vars(parser.parse_args())

    dids: List[str] = args.get("did", [])

    async with aiohttp.ClientSession() as session:
        resolvers: Dict[Network, SignumDidResolver] = {
            Network.mainnet: SignumDidResolver(
                SignumLedgerClient(session, args["mainnet_node"])
            ),
            Network.testnet: SignumDidResolver(
                SignumLedgerClient(session, args["testnet_node"])
            ),
        }
        for did in dids:
            try:
                network = parse_did(did).network
            except DidParseError:
                # Any resolver reports the parse failure the same way
                network = Network.mainnet
            result = await resolvers[network].resolve(did)
            print(json.dumps(result.to_dict(), indent=2))


def main() -> None:
    asyncio.run(realMain())


if __name__ == "__main__":
    main()
