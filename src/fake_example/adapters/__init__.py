"""Adapters: configuration, logging, the CLI, and in-memory test doubles."""
