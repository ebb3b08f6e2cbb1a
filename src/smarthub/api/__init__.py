"""HTTP routers and error helpers for the hub service."""
