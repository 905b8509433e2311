"""HTTP API: routers and dependency providers."""
