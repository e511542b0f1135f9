# src/extension_bump/core/version.py

from __future__ import annotations

from enum import StrEnum
from typing import NamedTuple


class VersionBumpError(ValueError):
    """Base error: the requested bump is refused or an input file is malformed."""


class InvalidVersionError(VersionBumpError):
    pass


class ManifestError(VersionBumpError):
    pass


class TaskDescriptorError(VersionBumpError):
    pass


class BumpKind(StrEnum):
    MINOR = "minor"
    PATCH = "patch"


class Version(NamedTuple):
    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


def _is_canonical_number(part: str) -> bool:
    return part.isascii() and part.isdigit() and (part == "0" or not part.startswith("0"))


def parse_version(text: str) -> Version:
    """Parse "X.Y.Z" into a Version of non-negative ints."""
    parts = str(text).split(".")
    if len(parts) != 3:
        raise InvalidVersionError(f"Version must have a format of X.Y.Z (got {text!r})")
    # Canonical components only ("2.04.0" is refused), so str(Version) == text.
    if not all(_is_canonical_number(p) for p in parts):
        raise InvalidVersionError(
            f"Version components must be non-negative integers "
            f"without leading zeros (got {text!r})"
        )
    major, minor, patch = (int(p) for p in parts)
    return Version(major, minor, patch)


def classify_bump(old: Version, new: Version) -> BumpKind | None:
    """
    MINOR: minor goes up and patch resets to 0.
    PATCH: minor unchanged and patch goes up.
    Majors are not compared here, see assert_bump().
    """
    if old.minor < new.minor and new.patch == 0:
        return BumpKind.MINOR
    if old.minor == new.minor and old.patch < new.patch:
        return BumpKind.PATCH
    return None


def assert_bump(old: Version, new: Version) -> BumpKind:
    kind = classify_bump(old, new)
    if kind is None:
        raise VersionBumpError(
            f"Input version must be bigger than current version ({new} vs current {old})"
        )
    if old.major != new.major:
        raise VersionBumpError(
            f"Upgrading Major version using this script is forbidden ({old.major} -> {new.major})"
        )
    return kind
