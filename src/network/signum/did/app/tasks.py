import asyncio
import logging
from typing import NoReturn

from aiohttp import web

from network.signum.did.app.config import HealthGaugeAppKey

logger = logging.getLogger(__name__)

HEALTH_TICK_SECONDS = 30


async def tick_health_task(app: web.Application) -> NoReturn:
    """
    Decay the health gauge every 30 seconds, forgiving one recorded failure each time.
    """

    logger.info("Starting health gauge task")

    health_gauge = app[HealthGaugeAppKey]
    while True:
        await health_gauge.decay()
        await asyncio.sleep(HEALTH_TICK_SECONDS)
