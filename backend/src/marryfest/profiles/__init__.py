"""Profile HTTP endpoints."""
