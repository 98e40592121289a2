"""Domain models (Pydantic v2).

Versions are validated straight from the registry JSON; unknown keys are
ignored so additions to the API do not break decoding.
"""

from __future__ import annotations

from enum import Enum
from urllib.parse import quote

from pydantic import BaseModel, Field, ValidationError
from pydantic.config import ConfigDict

from ghcr_cleaner.core.errors import OwnerError


class OwnerKind(str, Enum):
    USER = "user"
    ORGANIZATION = "organization"


class PackageOwner(BaseModel):
    """Account (user or organization) a package is published under.

    The kind decides the URL path segment used by every registry request;
    the display form is just the account name.
    """

    model_config = ConfigDict(frozen=True)

    kind: OwnerKind = Field(
        ...,
        description="Whether the account is a user or an organization.",
    )
    name: str = Field(
        ...,
        min_length=1,
        max_length=256,
        description="Account login name.",
    )

    @classmethod
    def user(cls, name: str) -> PackageOwner:
        return cls(kind=OwnerKind.USER, name=name)

    @classmethod
    def organization(cls, name: str) -> PackageOwner:
        return cls(kind=OwnerKind.ORGANIZATION, name=name)

    @classmethod
    def parse(cls, user: str | None, org: str | None) -> PackageOwner:
        """Build the owner from the two mutually exclusive CLI values.

        Raises `OwnerError` unless exactly one non-blank value is given.
        """

        user = user.strip() if user is not None else None
        org = org.strip() if org is not None else None
        if user and org:
            raise OwnerError("Only one of --user and --org may be provided")
        if not user and not org:
            raise OwnerError("Neither --user nor --org was provided")
        try:
            return cls.user(user) if user else cls.organization(org)
        except ValidationError as exc:
            raise OwnerError(f"Invalid owner name: {user or org}") from exc

    @property
    def path_segment(self) -> str:
        if self.kind is OwnerKind.USER:
            return f"users/{quote(self.name, safe='')}"
        return f"orgs/{quote(self.name, safe='')}"

    def __str__(self) -> str:
        return self.name


class ContainerVersionMetadata(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    tags: list[str] = Field(
        default_factory=list,
        description="Tags currently pointing at this version.",
    )


class PackageVersionMetadata(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    package_type: str = Field(
        ...,
        description="Registry package type (always 'container' here).",
    )
    container: ContainerVersionMetadata = Field(
        default_factory=ContainerVersionMetadata,
        description="Container specific metadata.",
    )


class PackageVersion(BaseModel):
    """One stored version of a container package.

    `id` is registry-assigned and only used to delete the version; `name` is
    the content digest (`sha256:...`).
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int = Field(
        ...,
        ge=0,
        description="Registry-assigned numeric identifier.",
    )
    name: str = Field(
        ...,
        description="Content digest of the version.",
    )
    metadata: PackageVersionMetadata = Field(
        ...,
        description="Package metadata, including the container tags.",
    )

    @property
    def tags(self) -> list[str]:
        return self.metadata.container.tags

    @property
    def is_untagged(self) -> bool:
        return not self.metadata.container.tags
