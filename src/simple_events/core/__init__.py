"""Core: handler registry, subscribe-only view, errors."""
