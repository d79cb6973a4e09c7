"""Core logic for packstack: identifier extraction, dispatch, packaging and configuration."""
