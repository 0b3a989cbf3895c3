"""Routers por feature (auth, users, leaves)."""
