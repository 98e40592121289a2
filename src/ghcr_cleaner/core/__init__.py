"""Core: domain models, contracts, configuration and the cleanup workflow.

Nothing in here knows about the CLI; HTTP details live in `adapters`.
"""
