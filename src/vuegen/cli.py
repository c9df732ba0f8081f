"""Command line interface for generating Vue component boilerplate."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

import colorama

from . import console
from .config import ComponentConfig
from .errors import MissingNameError, VuegenError
from .scaffold import ComponentScaffolder

LOGGER = logging.getLogger(__name__)

USAGE_HINT = "Example: vuegen -n myComponent"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vuegen",
        description="Generate the boilerplate files for a Vue component",
    )
    parser.add_argument("-n", "--name", nargs="?", help="camelCase name of the component")
    parser.add_argument(
        "-l",
        "--language",
        nargs="?",
        const="",
        default="ts",
        help="Language of the component logic file: 'ts' (default) or 'js'",
    )
    parser.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=None,
        help="Directory in which the component folder is created (defaults to the current directory)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each generation step to stderr",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("vuegen").setLevel(level)


def _report_progress(kind: str, value: str) -> None:
    if kind == "directory":
        console.success("Created directory: ", value)
        console.info("\n📝 Generating files:")
    else:
        console.success("Created: ", value)


def _print_banner(name: str, language: str) -> None:
    console.info("\n🚀 Starting Vue Component Generator...")
    console.rule()
    console.highlight("📝 Requested name: ", name)
    console.highlight("🛠  Language: ", language)
    console.rule()
    console.info("")


def _handle_generate(args: argparse.Namespace) -> int:
    config = ComponentConfig.from_args(
        args.name,
        language=args.language,
        base_directory=args.directory,
    )
    _print_banner(config.requested_name, config.language.value)

    if config.corrected:
        console.warning(config.warning or "")
        console.converted("✓ Converting to: ", f"{config.name}\n")

    scaffolder = ComponentScaffolder(reporter=_report_progress)
    report = scaffolder.create(config)
    LOGGER.debug("Generated %s in %s", report.component, report.directory)

    console.info("\n✨ Generation Complete!")
    console.rule()
    console.result("📁 Location: ", str(report.directory))
    console.result("📦 Component: ", report.folder_name)
    console.rule()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    colorama.just_fix_windows_console()
    _configure_logging(args.verbose)

    try:
        return _handle_generate(args)
    except VuegenError as exc:
        LOGGER.debug("Generation aborted: %s", exc.__class__.__name__)
        console.error(str(exc))
        if isinstance(exc, MissingNameError):
            console.hint(f"\n{USAGE_HINT}")
        return exc.exit_code


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
