"""Version comparison across vendor version-string dialects.

Vendors never agree on a version format. Each component kind selects a
dialect, and each dialect is a chain of increasingly permissive strategies:

- OS build: ``26100.6584`` compared as (build, revision), revision defaults to 0
- GPU driver: ``32.0.21025.10016`` compared segment-wise after zero padding
- BIOS / NPU: semantic version (``v1.2.3`` allowed), then zero-padded numeric, then
  normalized alphanumeric text (``FP7T107``)
- Generic: strict semantic version, then plain text

Parsers return ``None`` when they reject an input; callers move on to the
next strategy. Nothing in this module raises on malformed input.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from itertools import zip_longest
from typing import NamedTuple

from baseline_audit.models.compliance import UNKNOWN, ComponentKind

_NUMERIC = re.compile(r"[0-9]+")
_DOTTED_NUMERIC = re.compile(r"[0-9]+(?:\.[0-9]+)*")
_NON_VERSION_CHARS = re.compile(r"[^A-Za-z0-9.]")

_PRERELEASE_ID = r"(?:0|[1-9][0-9]*|[0-9]*[A-Za-z-][0-9A-Za-z-]*)"
_SEMVER = re.compile(
    r"v?(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)\.(0|[1-9][0-9]*)"
    rf"(?:-({_PRERELEASE_ID}(?:\.{_PRERELEASE_ID})*))?"
    r"(?:\+[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?"
)


class Comparison(NamedTuple):
    """Outcome of a comparison and the strategy that decided it."""

    compliant: bool
    strategy: str


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass(frozen=True)
class SemanticVersion:
    """A strict SemVer 2.0.0 version. Build metadata is dropped."""

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = field(default=())

    @classmethod
    def parse(cls, text: str) -> SemanticVersion | None:
        """Parse ``text`` or return None if it is not strict SemVer.

        Surrounding whitespace and a single leading ``v`` are accepted.
        """
        match = _SEMVER.fullmatch(text.strip())
        if match is None:
            return None
        major, minor, patch, prerelease = match.groups()
        try:
            return cls(
                major=int(major),
                minor=int(minor),
                patch=int(patch),
                prerelease=tuple(prerelease.split(".")) if prerelease else (),
            )
        except ValueError:
            return None

    def compare(self, other: SemanticVersion) -> int:
        """Return -1, 0 or 1 following SemVer precedence."""
        core = (self.major, self.minor, self.patch)
        other_core = (other.major, other.minor, other.patch)
        if core != other_core:
            return -1 if core < other_core else 1
        return _compare_prerelease(self.prerelease, other.prerelease)


def _compare_prerelease(left: tuple[str, ...], right: tuple[str, ...]) -> int:
    if left == right:
        return 0
    # A release outranks any of its pre-releases
    if not left:
        return 1
    if not right:
        return -1
    for a, b in zip(left, right):
        if a == b:
            continue
        a_numeric, b_numeric = a.isdigit(), b.isdigit()
        if a_numeric and b_numeric:
            # No leading zeros in numeric identifiers, so length orders first
            return -1 if (len(a), a) < (len(b), b) else 1
        if a_numeric:
            return -1
        if b_numeric:
            return 1
        return -1 if a < b else 1
    return _sign(len(left) - len(right))


def parse_numeric_segments(text: str) -> tuple[int, ...] | None:
    """Split a dotted version into integers, or None if any segment is not digits."""
    segments = text.split(".")
    if not all(_NUMERIC.fullmatch(segment) for segment in segments):
        return None
    try:
        return tuple(int(segment) for segment in segments)
    except ValueError:
        # Exceeds the interpreter's integer string conversion limit
        return None


def parse_build_number(text: str) -> tuple[int, int] | None:
    """Parse an OS build such as ``26100.6584`` into (build, revision)."""
    segments = parse_numeric_segments(text)
    if segments is None:
        return None
    revision = segments[1] if len(segments) > 1 else 0
    return segments[0], revision


def padded_gte(current: tuple[int, ...], minimum: tuple[int, ...]) -> bool:
    """Compare numeric vectors after right-padding the shorter one with zeros."""
    for cur, req in zip_longest(current, minimum, fillvalue=0):
        if cur != req:
            return cur > req
    return True


def normalize(text: str) -> str:
    """Drop everything but letters, digits and dots, then lowercase."""
    return _NON_VERSION_CHARS.sub("", text).lower()


def _compare_semver(current: str, minimum: str) -> Comparison | None:
    cur = SemanticVersion.parse(current)
    req = SemanticVersion.parse(minimum)
    if cur is None or req is None:
        return None
    return Comparison(cur.compare(req) >= 0, "semver")


def _compare_build_numbers(current: str, minimum: str) -> Comparison | None:
    cur = parse_build_number(current)
    req = parse_build_number(minimum)
    if cur is None or req is None:
        return None
    return Comparison(cur >= req, "build_number")


def _compare_driver_versions(current: str, minimum: str) -> Comparison | None:
    cur = parse_numeric_segments(current)
    req = parse_numeric_segments(minimum)
    if cur is None or req is None:
        return None
    return Comparison(padded_gte(cur, req), "padded_numeric")


def _compare_firmware_versions(current: str, minimum: str) -> Comparison:
    semver = _compare_semver(current, minimum)
    if semver is not None:
        return semver

    if _DOTTED_NUMERIC.fullmatch(current) and _DOTTED_NUMERIC.fullmatch(minimum):
        driver = _compare_driver_versions(current, minimum)
        if driver is not None:
            return driver

    return Comparison(normalize(current) >= normalize(minimum), "normalized_text")


def _compare_generic(current: str, minimum: str) -> Comparison:
    semver = _compare_semver(current, minimum)
    if semver is not None:
        return semver
    return Comparison(current >= minimum, "text")


def compare(current: str, minimum: str, kind: ComponentKind = ComponentKind.GENERIC) -> Comparison:
    """Decide whether ``current`` satisfies ``minimum`` for a component kind.

    Args:
        current: Installed version string
        minimum: Required minimum version string
        kind: Component kind selecting the dialect

    Returns:
        Comparison with the verdict and the strategy that produced it
    """
    if not isinstance(current, str) or not isinstance(minimum, str):
        return Comparison(False, "unknown")
    if current == UNKNOWN or minimum == UNKNOWN:
        return Comparison(False, "unknown")

    verdict: Comparison | None
    match kind:
        case ComponentKind.OS_BUILD:
            verdict = _compare_build_numbers(current, minimum)
        case ComponentKind.GPU_DRIVER:
            verdict = _compare_driver_versions(current, minimum)
        case ComponentKind.BIOS | ComponentKind.NPU_DRIVER:
            verdict = _compare_firmware_versions(current, minimum)
        case _:
            verdict = None

    if verdict is None:
        return _compare_generic(current, minimum)
    return verdict


def satisfies(current: str, minimum: str, kind: ComponentKind = ComponentKind.GENERIC) -> bool:
    """Return True if ``current`` meets ``minimum``. Never raises."""
    return compare(current, minimum, kind).compliant
