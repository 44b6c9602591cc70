"""Presentation layer: inbound adapters (HTTP API, CLI)."""
