"""Command line surface (typer + rich)."""
