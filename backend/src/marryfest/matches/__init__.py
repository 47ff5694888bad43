"""Match HTTP endpoints."""
