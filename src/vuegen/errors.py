"""Exception types raised while resolving and generating components."""

from __future__ import annotations


class VuegenError(RuntimeError):
    """Base class for failures that terminate a generation run."""

    exit_code = 1

    def __init__(self, message: str) -> None:
        super().__init__(message)


class MissingNameError(VuegenError):
    """Raised when no component name was supplied."""

    def __init__(self, message: str = "Component name is required. Use -n or --name flag.") -> None:
        super().__init__(message)


class InvalidLanguageError(VuegenError):
    """Raised when the language flag is not one of the supported values."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Invalid language '{value}'. Use 'js' or 'ts'")
        self.value = value


class InvalidNameError(VuegenError):
    """Raised when a name cannot be turned into a usable camelCase identifier."""


class ComponentExistsError(VuegenError):
    """Raised when the target component directory is already present."""

    def __init__(self, folder_name: str) -> None:
        super().__init__(f"Directory {folder_name} already exists")
        self.folder_name = folder_name


class GenerationIOError(VuegenError):
    """Raised when the filesystem rejects a directory or file write."""


__all__ = [
    "ComponentExistsError",
    "GenerationIOError",
    "InvalidLanguageError",
    "InvalidNameError",
    "MissingNameError",
    "VuegenError",
]
