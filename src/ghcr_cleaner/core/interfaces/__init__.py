"""Contracts implemented by the adapters and by test doubles."""
