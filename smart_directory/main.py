#!/usr/bin/env python3
"""
smart-directory - prompt segment showing a compact, unambiguous working directory.

CRITICAL: this runs on every prompt draw:
- Only the rendered segment goes to stdout (anything else ends up in the prompt)
- Logs go to stderr and stay quiet unless LOG_LEVEL asks for more
- Always exit 0 after a render attempt (a failing prompt command breaks the shell)
"""

import argparse
import logging
import os
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from smart_directory.config import DEFAULT_LOG_LEVEL, VERSION, Settings, get_settings
from smart_directory.core.formatter import SHELL_ESCAPE_WRAPPERS, to_ansi
from smart_directory.core.smart_directory import module
from smart_directory.models.segments import RenderContext
from smart_directory.services.git_service import GitService

logger = logging.getLogger(__name__)

SHELL_CHOICES = [*SHELL_ESCAPE_WRAPPERS, "fish", "none"]


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
        force=True,
    )


def get_logical_dir(physical_dir: Path, logical_path: str | None = None) -> Path:
    """Pick the directory as the shell sees it.

    Prefers an explicit `--logical-path`, then `$PWD` when it still points at
    the physical directory (it can be stale after the directory moved).
    """
    if logical_path:
        return Path(logical_path)

    pwd = os.environ.get("PWD", "")
    if pwd and Path(pwd).is_absolute():
        try:
            if os.path.samefile(pwd, physical_dir):
                return Path(pwd)
        except OSError:
            pass  # Fall through to the physical path

    return physical_dir


def build_context(args: argparse.Namespace, settings: Settings) -> RenderContext:
    """Gather home, working directories and repository root for one render."""
    physical_dir = Path(args.path) if args.path else Path(os.getcwd())
    logical_dir = get_logical_dir(physical_dir, args.logical_path)
    repo_root = GitService(timeout=settings.GIT_TIMEOUT).find_repo_root(physical_dir)

    return RenderContext(
        current_dir=physical_dir,
        logical_dir=logical_dir,
        home=Path.home(),
        repo_root=repo_root,
    )


def render(args: argparse.Namespace, settings: Settings) -> str:
    """Render the prompt segment as the string to print."""
    context = build_context(args, settings)
    text = module(context, settings)
    if text is None:
        return ""

    if args.plain:
        return text.plain

    shell = None if args.shell == "none" else args.shell
    return to_ansi(text, shell)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="smart-directory",
        description="Print a compact working directory for shell prompts",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"smart-directory {VERSION}",
    )
    parser.add_argument("--path", default=None, help="Physical directory (default: cwd)")
    parser.add_argument(
        "--logical-path",
        default=None,
        help="Directory as the shell reports it (default: $PWD when valid)",
    )
    parser.add_argument(
        "--home-symbol",
        default=None,
        help="Symbol replacing the home directory (overrides config)",
    )
    parser.add_argument(
        "--shell",
        choices=SHELL_CHOICES,
        default="none",
        help="Wrap escape sequences for this shell's prompt width accounting",
    )
    parser.add_argument("--plain", action="store_true", help="Print without styling")
    return parser.parse_args(argv)


def load_settings(args: argparse.Namespace) -> Settings:
    """Load settings and apply command line overrides."""
    settings = get_settings()
    if args.home_symbol is not None:
        settings = settings.model_copy(update={"HOME_SYMBOL": args.home_symbol})
    return settings


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    output = ""

    try:
        settings = load_settings(args)
        configure_logging(settings.LOG_LEVEL)
    except Exception:
        configure_logging(DEFAULT_LOG_LEVEL)
        logger.exception("Failed to load smart_directory settings")
    else:
        try:
            output = render(args, settings)
        except Exception:
            logger.exception("Failed to render smart_directory")

    sys.stdout.write(output)
    sys.stdout.flush()


if __name__ == "__main__":
    main()
