"""Generate boilerplate files for Vue components.

The package validates and normalises component names into camelCase
identifiers, renders the logic, markup and style stubs for a component, and
writes them into a new dash-case directory. Everything is usable
programmatically as well as through the ``vuegen`` command.
"""

from __future__ import annotations

from .config import ComponentConfig, parse_language
from .errors import (
    ComponentExistsError,
    GenerationIOError,
    InvalidLanguageError,
    InvalidNameError,
    MissingNameError,
    VuegenError,
)
from .filesystem import FileSystem, LocalFileSystem
from .naming import NameValidation, to_camel_case, to_dash_case, validate
from .scaffold import ComponentScaffolder
from .schema import GeneratedFile, GenerationReport, Language
from .templates import component_files

__all__ = [
    "ComponentConfig",
    "ComponentExistsError",
    "ComponentScaffolder",
    "FileSystem",
    "GeneratedFile",
    "GenerationIOError",
    "GenerationReport",
    "InvalidLanguageError",
    "InvalidNameError",
    "Language",
    "LocalFileSystem",
    "MissingNameError",
    "NameValidation",
    "VuegenError",
    "component_files",
    "parse_language",
    "to_camel_case",
    "to_dash_case",
    "validate",
]

__version__ = "0.1.0"
