"""Delete untagged container image versions from the GitHub package registry."""

__all__ = ["__app_name__", "__version__"]

__app_name__ = "ghcr-cleaner"
__version__ = "0.1.0"
