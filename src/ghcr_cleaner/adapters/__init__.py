"""Concrete implementations of the core contracts (httpx, GitHub REST API)."""
