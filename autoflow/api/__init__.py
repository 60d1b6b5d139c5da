"""HTTP API layer - routes, dependencies, middleware and error handlers."""
