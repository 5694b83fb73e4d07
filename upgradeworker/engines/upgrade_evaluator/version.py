"""Version model — policy validation and major-jump detection.

This is deliberately not a semantic-version grammar: a version is 2 or 3
dot-separated components, each made of ASCII letters, digits or ``-``.
Pre-release and build metadata are not distinguished.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_COMPONENT_RE = re.compile(r"[A-Za-z0-9-]+")
_MIN_COMPONENTS = 2
_MAX_COMPONENTS = 3


class InvalidVersionError(ValueError):
    """Version string failed the component policy check."""


@dataclass(frozen=True)
class Version:
    """A validated version. Only :func:`parse_and_validate` creates these."""

    raw: str
    components: tuple[str, ...]

    @property
    def major(self) -> str:
        return self.components[0]

    @property
    def major_number(self) -> int:
        """Leading component as an integer.

        A major that is not an unsigned integer (``"x.1.0"``, ``"-1.0"``)
        counts as ``0``. Callers rely on this fallback, so it is kept rather
        than rejected.
        """
        if not self.major.isdigit():
            return 0
        return int(self.major)

    def __str__(self) -> str:
        return self.raw


def parse_and_validate(value: str) -> Version:
    """Split *value* on ``.`` and check every component.

    Raises :class:`InvalidVersionError` when the component count is not 2
    or 3, or when any component is empty or holds a character other than
    an ASCII alphanumeric or ``-``.
    """
    parts = value.split(".")
    if not _MIN_COMPONENTS <= len(parts) <= _MAX_COMPONENTS:
        raise InvalidVersionError(
            f"expected {_MIN_COMPONENTS} or {_MAX_COMPONENTS} components, got {len(parts)}: {value!r}"
        )
    for part in parts:
        if not _COMPONENT_RE.fullmatch(part):
            raise InvalidVersionError(f"invalid component {part!r} in {value!r}")
    return Version(raw=value, components=tuple(parts))


def is_valid_version(value: object) -> bool:
    if not isinstance(value, str):
        return False
    try:
        parse_and_validate(value)
    except InvalidVersionError:
        return False
    return True


def is_major_jump(current: Version, target: Version) -> bool:
    """True iff *target*'s major strictly exceeds *current*'s (downgrades are never jumps)."""
    return target.major_number > current.major_number
