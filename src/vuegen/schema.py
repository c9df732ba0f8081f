"""Typed records shared by the renderer, scaffolder and CLI."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Language(str, Enum):
    """Source language of the generated logic file."""

    TS = "ts"
    JS = "js"


DEFAULT_LANGUAGE = Language.TS


class GeneratedFile(BaseModel):
    """A single file produced for a component."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    filename: str = Field(..., min_length=1, description="File name relative to the component directory.")
    content: str = Field(..., description="Text written to the file.")


class GenerationReport(BaseModel):
    """Summary of a completed generation run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    component: str = Field(..., description="Final camelCase component identifier.")
    folder_name: str = Field(..., description="Dash-case name of the created directory.")
    directory: Path = Field(..., description="Absolute path of the created directory.")
    language: Language = Field(..., description="Language used for the logic file.")
    files: List[str] = Field(default_factory=list, description="Created file names in creation order.")


__all__ = ["DEFAULT_LANGUAGE", "GeneratedFile", "GenerationReport", "Language"]
