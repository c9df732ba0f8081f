"""Identifier validation and case conversion for component names."""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["NameValidation", "is_camel_case", "to_camel_case", "to_dash_case", "validate"]


_CAMEL_CASE = re.compile(r"^[a-z][a-zA-Z0-9]*$")
_SEPARATOR_RUN = re.compile(r"[-_\s]+(.)?")
_LEADING_UPPER = re.compile(r"^([A-Z])")
_WORD_BOUNDARY = re.compile(r"([a-z])([A-Z])")

NAME_REQUIRED = "Component name is required"
NAME_NOT_CAMEL_CASE = "Component name must be camelCase"


@dataclass(frozen=True, slots=True)
class NameValidation:
    """Outcome of :func:`validate`.

    Attributes
    ----------
    valid:
        ``True`` when the name already is a camelCase identifier.
    value:
        The accepted name. Only set when :attr:`valid` is ``True``.
    message:
        Why the name was rejected. Only set when :attr:`valid` is ``False``.
    suggestion:
        A best-effort camelCase correction of a rejected, non-empty name. The
        suggestion is not guaranteed to pass validation itself.
    """

    valid: bool
    value: str | None = None
    message: str | None = None
    suggestion: str | None = None


def is_camel_case(value: str) -> bool:
    """Return ``True`` when ``value`` starts lowercase and is ASCII alphanumeric."""

    return bool(_CAMEL_CASE.fullmatch(value))


def validate(name: str | None) -> NameValidation:
    """Check ``name`` against the camelCase identifier rules."""

    if not name:
        return NameValidation(valid=False, message=NAME_REQUIRED)

    if not is_camel_case(name):
        return NameValidation(
            valid=False,
            message=NAME_NOT_CAMEL_CASE,
            suggestion=to_camel_case(name),
        )

    return NameValidation(valid=True, value=name)


def to_camel_case(value: str) -> str:
    """Collapse ``-``, ``_`` and whitespace runs, upper-casing the next character."""

    def upper_next(match: re.Match[str]) -> str:
        following = match.group(1)
        return following.upper() if following else ""

    collapsed = _SEPARATOR_RUN.sub(upper_next, value)
    return _LEADING_UPPER.sub(lambda match: match.group(1).lower(), collapsed)


def to_dash_case(value: str) -> str:
    """Return the dash-case folder name for a camelCase ``value``."""

    return _WORD_BOUNDARY.sub(r"\1-\2", value).lower()
