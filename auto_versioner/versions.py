"""Version parsing and bumping utilities.

Only plain ``MAJOR.MINOR.PATCH`` versions are accepted. Prerelease and
build metadata, as well as short forms like ``"1.2"``, are rejected rather
than padded so that a malformed version source is caught before any file
is rewritten.
"""

from __future__ import annotations

from typing import Literal

import semver

from .errors import InvalidBumpKind, InvalidVersionFormat

BumpKind = Literal["major", "minor", "patch"]
BUMP_KINDS: tuple[BumpKind, ...] = ("major", "minor", "patch")


def parse_version(version_str: str) -> semver.Version:
    """Parse a strict ``MAJOR.MINOR.PATCH`` string into a semver.Version.

    Each component must consist of ASCII digits only. Leading zeros are
    tolerated and dropped ("01.2.3" → 1.2.3).

    Raises:
        InvalidVersionFormat: If the string does not have that shape.
    """
    if not isinstance(version_str, str):
        raise InvalidVersionFormat(version_str)
    parts = version_str.strip().split(".")
    if len(parts) != 3 or not all(p.isascii() and p.isdigit() for p in parts):
        raise InvalidVersionFormat(version_str)
    major, minor, patch = (int(p) for p in parts)
    return semver.Version(major, minor, patch)


def calculate_new_version(current: str, bump_kind: str) -> str:
    """Return the next version for the given bump kind.

    Lower components are reset to zero:
        ("1.2.3", "major") → "2.0.0"
        ("1.2.3", "minor") → "1.3.0"
        ("1.2.3", "patch") → "1.2.4"

    Raises:
        InvalidBumpKind: If bump_kind is not major, minor or patch.
        InvalidVersionFormat: If current is not MAJOR.MINOR.PATCH.
    """
    if bump_kind not in BUMP_KINDS:
        raise InvalidBumpKind(bump_kind)
    version = parse_version(current)
    if bump_kind == "major":
        return str(version.bump_major())
    if bump_kind == "minor":
        return str(version.bump_minor())
    return str(version.bump_patch())
