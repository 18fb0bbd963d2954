"""Adapters – concrete transports (install the matching extra)."""
