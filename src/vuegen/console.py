"""Colored status output for the command line interface."""

from __future__ import annotations

import sys
from typing import TextIO

from colorama import Fore, Style

RULE = "-" * 40


def _emit(text: str, stream: TextIO | None) -> None:
    print(text, file=stream if stream is not None else sys.stdout)


def info(text: str, stream: TextIO | None = None) -> None:
    _emit(text, stream)


def rule(stream: TextIO | None = None) -> None:
    _emit(RULE, stream)


def highlight(label: str, value: str, stream: TextIO | None = None) -> None:
    _emit(f"{label}{Fore.BLUE}{value}{Style.RESET_ALL}", stream)


def result(label: str, value: str, stream: TextIO | None = None) -> None:
    _emit(f"{label}{Fore.GREEN}{value}{Style.RESET_ALL}", stream)


def converted(label: str, value: str, stream: TextIO | None = None) -> None:
    _emit(f"{Fore.BLUE}{label}{Fore.GREEN}{value}{Style.RESET_ALL}", stream)


def success(label: str, value: str = "", stream: TextIO | None = None) -> None:
    _emit(f"{Fore.GREEN}✓ {label}{Style.RESET_ALL}{value}", stream)


def warning(text: str, stream: TextIO | None = None) -> None:
    _emit(f"{Fore.YELLOW}⚠ Warning: {text}{Style.RESET_ALL}", stream or sys.stderr)


def hint(text: str, stream: TextIO | None = None) -> None:
    _emit(f"{Fore.YELLOW}{text}{Style.RESET_ALL}", stream)


def error(text: str, stream: TextIO | None = None) -> None:
    _emit(f"{Fore.RED}❌ Error: {text}{Style.RESET_ALL}", stream or sys.stderr)


__all__ = ["RULE", "converted", "error", "highlight", "hint", "info", "result", "rule", "success", "warning"]
