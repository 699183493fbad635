"""Row records of the verification table: one dependency per row."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class VerificationStatus(Enum):
    """Outcome of checking a dependency version against the trusted reviews."""

    VERIFIED = "verified"
    INSUFFICIENT = "insufficient"
    NEGATIVE = "negative"


@dataclass(frozen=True)
class CountPair:
    """A count for the exact version and across all versions."""

    version: int = 0
    total: int = 0


@dataclass(frozen=True)
class TrustedPair:
    """A count restricted to trusted reviewers, and the overall count."""

    trusted: int = 0
    total: int = 0


@dataclass(frozen=True)
class ComputedDep:
    """Everything the verification found out about a dependency."""

    trust: VerificationStatus
    reviews: CountPair
    issues: TrustedPair
    latest_trusted_version: Optional[str] = None
    downloads: Optional[CountPair] = None
    owners: Optional[TrustedPair] = None
    loc: Optional[int] = None


@dataclass(frozen=True)
class Dep:
    """A dependency row. ``computed`` is None until its data is known."""

    name: str
    version: str
    computed: Optional[ComputedDep] = None


def _part_key(part: str) -> tuple[int, Union[int, str]]:
    if part.isdigit():
        return (0, int(part))
    return (1, part)


def _version_key(version: str) -> tuple:
    """Sort key following semver precedence.

    Build metadata after ``+`` is ignored. Dotted parts compare as numbers
    when numeric and as text otherwise, and a pre-release (``-suffix``) sorts
    before the same version without one.
    """
    release, _, pre_release = version.split("+", 1)[0].partition("-")
    release_key = tuple(_part_key(part) for part in release.split("."))
    if not pre_release:
        return release_key, (1,)
    return release_key, (0,) + tuple(_part_key(part) for part in pre_release.split("."))


def latest_trusted_version_string(base: str, latest: Optional[str]) -> str:
    """Describe the latest trusted version relative to the one in use.

    Returns:
        "" when nothing is trusted, "=" when the version in use is the latest
        trusted one, otherwise the latest trusted version prefixed with an
        arrow telling whether it is newer or older
    """
    if latest is None:
        return ""
    latest_key, base_key = _version_key(latest), _version_key(base)
    if latest_key == base_key:
        return "="
    if latest_key > base_key:
        return f"↑{latest}"
    return f"↓{latest}"
