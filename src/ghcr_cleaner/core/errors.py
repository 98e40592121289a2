"""Error taxonomy.

- `ConfigurationError`: fatal, raised before any network call.
- `RegistryError` subclasses: raised by registry clients; fatal for one package.
- `PackageCleanupError`: wraps a `RegistryError` with owner/package context.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ghcr_cleaner.core.domain.models import PackageOwner


class CleanerError(Exception):
    """Base class for every error raised by ghcr-cleaner."""


class ConfigurationError(CleanerError):
    """Invalid or missing configuration (owner, token, client setup)."""


class OwnerError(ConfigurationError):
    """Neither or both of user/organization were given."""


class RegistryError(CleanerError):
    """A call to the package registry failed."""


class PackageNotFoundError(RegistryError):
    def __init__(self, owner: PackageOwner, package_name: str) -> None:
        self.owner = owner
        self.package_name = package_name
        super().__init__(f"Package {owner}/{package_name} does not exist")


class RegistryStatusError(RegistryError):
    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"Server returned status {status_code}")


class RegistryTransportError(RegistryError):
    """Connection error, timeout or any other network level failure."""


class MalformedResponseError(RegistryError):
    """The registry answered 2xx but the body is not a list of versions."""


class InvalidRequestError(RegistryError):
    """The request cannot be built (e.g. an empty package name)."""


class PackageCleanupError(CleanerError):
    def __init__(self, owner: PackageOwner, package_name: str, message: str) -> None:
        self.owner = owner
        self.package_name = package_name
        super().__init__(message)

    def __str__(self) -> str:
        text = super().__str__()
        if self.__cause__ is not None:
            return f"{text}: {self.__cause__}"
        return text
