"""Interest HTTP endpoints."""
