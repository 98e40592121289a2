from __future__ import annotations

import pytest

from ghcr_cleaner.core.domain.models import OwnerKind, PackageOwner, PackageVersion
from ghcr_cleaner.core.errors import ConfigurationError, OwnerError

from .conftest import make_version


def test_owner_path_segment_and_display() -> None:
    user = PackageOwner.user("alice")
    org = PackageOwner.organization("acme")

    assert user.path_segment == "users/alice"
    assert org.path_segment == "orgs/acme"
    assert str(user) == "alice"
    assert str(org) == "acme"
    assert f"{org}/pkg" == "acme/pkg"


@pytest.mark.parametrize(
    ("user", "org", "kind", "name"),
    [
        ("alice", None, OwnerKind.USER, "alice"),
        (None, "acme", OwnerKind.ORGANIZATION, "acme"),
        (" alice ", "", OwnerKind.USER, "alice"),
    ],
)
def test_owner_parse(user, org, kind, name) -> None:
    owner = PackageOwner.parse(user, org)
    assert owner.kind is kind
    assert owner.name == name


@pytest.mark.parametrize(
    ("user", "org"),
    [(None, None), ("", "  "), ("alice", "acme"), ("x" * 300, None)],
)
def test_owner_parse_rejects_invalid(user, org) -> None:
    with pytest.raises(OwnerError):
        PackageOwner.parse(user, org)


def test_owner_error_is_configuration_error() -> None:
    assert issubclass(OwnerError, ConfigurationError)


def test_owners_compare_by_value() -> None:
    assert PackageOwner.user("a") == PackageOwner.user("a")
    assert PackageOwner.user("a") != PackageOwner.organization("a")
    assert len({PackageOwner.user("a"), PackageOwner.user("a")}) == 1


def test_version_from_api_payload_ignores_unknown_keys() -> None:
    version = PackageVersion.model_validate(
        {
            "id": 42,
            "name": "sha256:abc",
            "url": "https://api.github.com/...",
            "created_at": "2024-01-01T00:00:00Z",
            "metadata": {
                "package_type": "container",
                "container": {"tags": ["latest", "v1"]},
            },
        }
    )
    assert version.id == 42
    assert version.tags == ["latest", "v1"]
    assert not version.is_untagged


def test_version_untagged() -> None:
    assert make_version(1).is_untagged
    assert not make_version(2, ["v2"]).is_untagged


def test_owner_path_segment_escapes_reserved_characters() -> None:
    assert PackageOwner.organization("a/b").path_segment == "orgs/a%2Fb"
    assert PackageOwner.user("me?x=1#y").path_segment == "users/me%3Fx%3D1%23y"
    assert str(PackageOwner.organization("a/b")) == "a/b"
