"""
Configuration Module for the Signum DID Resolver Service

This module defines the configuration system for the resolver service, using Pydantic for
settings validation and dependency injection through AppKeys.

The configuration follows these principles:
1. Environment-based configuration with sensible defaults
2. Strong validation and typing through Pydantic
3. Dependency injection pattern using aiohttp's app context

The Settings class serves as the central configuration point, loaded from environment
variables with defaults pointing at public Signum nodes. All application components access
settings and shared resources through typed AppKeys.

Key configuration areas include:
- Service networking
- Signum node endpoints per network
- Cache directives for resolved documents
- Monitoring and error reporting
"""

import asyncio
from typing import Dict, Final, Literal, Optional
import logging

from aiohttp import ClientSession, web
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings

from network.signum.did.app.metrics import MetricsClient
from network.signum.did.model.did import Network
from network.signum.did.model.health import HealthGauge
from network.signum.did.resolve.resolver import SignumDidResolver


logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings for the resolver service.

    Values are loaded from environment variables (case-insensitive field names unless an
    alias is given), with defaults suitable for running against the public Signum nodes.
    """

    debug: bool = False
    """
    Enable debug mode for verbose logging and request tracing.
    Set with DEBUG=true environment variable.
    """

    http_port: int = Field(alias="port", default=5100)
    """
    HTTP port for the service to listen on.
    Set with PORT environment variable.
    """

    signum_mainnet_node: str = Field(
        "https://europe.signum.network",
        validation_alias=AliasChoices("signum_mainnet_node", "mainnet_node"),
    )
    """
    Signum node used to resolve mainnet DIDs.
    Set with SIGNUM_MAINNET_NODE or MAINNET_NODE environment variables.
    """

    signum_testnet_node: str = Field(
        "https://europe3.testnet.signum.network",
        validation_alias=AliasChoices("signum_testnet_node", "testnet_node"),
    )
    """
    Signum node used to resolve testnet DIDs.
    Set with SIGNUM_TESTNET_NODE or TESTNET_NODE environment variables.
    """

    ledger_request_timeout: float = 10.0
    """
    Total timeout in seconds for a single Signum node request. A timed out lookup is
    reported as an internalError resolution result.
    Set with LEDGER_REQUEST_TIMEOUT environment variable.
    """

    immutable_cache_max_age: int = 31536000  # 1 year
    """
    Cache lifetime in seconds for immutable documents (transactions, tokens).
    Set with IMMUTABLE_CACHE_MAX_AGE environment variable.
    """

    mutable_cache_max_age: int = 300  # 5 minutes
    """
    Browser cache lifetime in seconds for mutable documents (accounts, aliases, contracts).
    Set with MUTABLE_CACHE_MAX_AGE environment variable.
    """

    mutable_cdn_max_age: int = 60
    """
    Shared/CDN cache lifetime in seconds for mutable documents.
    Set with MUTABLE_CDN_MAX_AGE environment variable.
    """

    sentry_dsn: Optional[str] = None
    """
    Sentry DSN for error reporting. Optional, no error reporting if not set.
    Set with SENTRY_DSN environment variable.
    """

    metrics_backend: Literal["telegraf", "none"] = "telegraf"
    """
    Metrics backend, "telegraf" for StatsD/Telegraf or "none" to disable metrics.
    Set with METRICS_BACKEND environment variable.
    """

    statsd_host: str = Field(alias="TELEGRAF_HOST", default="telegraf")
    """
    StatsD/Telegraf host for metrics collection.
    Set with TELEGRAF_HOST environment variable.
    """

    statsd_port: int = Field(alias="TELEGRAF_PORT", default=8125)
    """
    StatsD/Telegraf port for metrics collection.
    Set with TELEGRAF_PORT environment variable.
    """

    statsd_prefix: str = "signum_did"
    """
    Prefix for all StatsD metrics from this service.
    Set with STATSD_PREFIX environment variable.
    """

    def node_for(self, network: Network) -> str:
        if network == Network.mainnet:
            return self.signum_mainnet_node
        return self.signum_testnet_node


# Application context keys for dependency injection
SettingsAppKey: Final = web.AppKey("settings", Settings)
"""AppKey for accessing the application settings"""

SessionAppKey: Final = web.AppKey("http_session", ClientSession)
"""AppKey for accessing the shared aiohttp client session used for Signum node requests"""

ResolversAppKey: Final = web.AppKey("resolvers", Dict[Network, SignumDidResolver])
"""AppKey for accessing the per-network DID resolvers"""

HealthGaugeAppKey: Final = web.AppKey("health_gauge", HealthGauge)
"""AppKey for accessing the health monitoring gauge"""

MetricsClientAppKey: Final = web.AppKey("metrics_client", MetricsClient)
"""AppKey for accessing the metrics client"""

TickHealthTaskAppKey: Final = web.AppKey("tick_health_task", asyncio.Task[None])
"""AppKey for the background task that decays the health gauge"""
