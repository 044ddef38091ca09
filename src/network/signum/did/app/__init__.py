"""
Resolver Application Layer

This package implements the web application layer of the resolver service, handling HTTP
requests and responses using the aiohttp framework. It exposes DID resolution over the
W3C DID Resolution HTTP(S) binding plus internal health endpoints.

Key Components:
- cli.py: Entry point for running the application
- server.py: Web server configuration and middleware setup
- config.py: Configuration management using Pydantic settings
- handlers/: Request handlers for resolution and internal endpoints
- tasks.py: Background task decaying the health gauge
- cors.py: CORS handling for the public resolution API
- metrics.py: Metrics backend abstraction

The application uses several middleware layers:
- Statsd middleware for metrics collection
- Sentry middleware for error reporting
- CORS middleware for cross-origin requests

It provides the following main endpoints:
- DID resolution (/1.0/identifiers/{did}, /api/identifiers/{did})
- Internal health checks (/internal/alive, /internal/ready)
"""
