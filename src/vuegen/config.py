"""Resolve raw command line input into a component configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .errors import InvalidLanguageError, InvalidNameError, MissingNameError
from .naming import is_camel_case, to_dash_case, validate
from .schema import DEFAULT_LANGUAGE, Language

__all__ = ["ComponentConfig", "parse_language"]


LOGGER = logging.getLogger(__name__)


def parse_language(value: str | Language | None) -> Language:
    """Return the :class:`Language` for ``value``, ignoring case."""

    if value is None:
        return DEFAULT_LANGUAGE
    if isinstance(value, Language):
        return value
    try:
        return Language(value.lower())
    except ValueError as exc:
        raise InvalidLanguageError(value) from exc


@dataclass(frozen=True, slots=True)
class ComponentConfig:
    """Identifiers and options describing one component to generate.

    Attributes
    ----------
    requested_name:
        The name exactly as the user typed it.
    name:
        The camelCase identifier used for file names and the exported
        component. Equal to :attr:`requested_name` unless it was corrected.
    folder_name:
        Dash-case form of :attr:`name`; the directory that will be created.
    language:
        Language of the logic file.
    base_directory:
        Directory in which :attr:`folder_name` is created.
    warning:
        The validation message when :attr:`name` is a correction, else ``None``.
    """

    requested_name: str
    name: str
    folder_name: str
    language: Language
    base_directory: Path
    warning: str | None = None

    @classmethod
    def from_args(
        cls,
        name: str | None,
        *,
        language: str | Language | None = None,
        base_directory: str | Path | None = None,
    ) -> "ComponentConfig":
        """Build a :class:`ComponentConfig` from user supplied values.

        The language is checked before the name so an unsupported language is
        reported even when the name would also need correcting. A name that
        fails validation is replaced by its suggestion; a suggestion that is
        empty or still not camelCase raises :class:`InvalidNameError`.
        """

        resolved_language = parse_language(language)
        if not name:
            raise MissingNameError()

        base = Path(base_directory) if base_directory is not None else Path.cwd()

        result = validate(name)
        warning: str | None = None
        if result.valid:
            final_name = name
        else:
            suggestion = result.suggestion or ""
            if not is_camel_case(suggestion):
                raise InvalidNameError(
                    f"{result.message}: could not derive a valid name from '{name}'"
                    + (f" (got '{suggestion}')" if suggestion else "")
                )
            LOGGER.debug("Corrected component name %r to %r", name, suggestion)
            final_name = suggestion
            warning = result.message

        return cls(
            requested_name=name,
            name=final_name,
            folder_name=to_dash_case(final_name),
            language=resolved_language,
            base_directory=base.expanduser().resolve(),
            warning=warning,
        )

    @property
    def corrected(self) -> bool:
        return self.warning is not None

    @property
    def target_directory(self) -> Path:
        return self.base_directory / self.folder_name
