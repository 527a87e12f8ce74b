"""Configuration resolution for typeahead-textual.

Candidate file priority order (highest to lowest):
1. --candidates / -c CLI argument
2. TYPEAHEAD_CANDIDATES environment variable
3. ~/.config/typeahead-textual/config.toml -> candidates_file key
4. The built-in car brand list (no file)
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

_CONFIG_PATH = Path.home() / ".config" / "typeahead-textual" / "config.toml"

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _load_config_dict() -> dict:
    """Load the full config.toml as a dict, or return empty dict on failure."""
    if not _CONFIG_PATH.exists():
        return {}
    if sys.version_info >= (3, 11):
        import tomllib
    else:
        import tomli as tomllib

    try:
        with open(_CONFIG_PATH, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError):
        return {}


def load_theme() -> str | None:
    """Return the saved theme name, or None if not set.

    Returns:
        Theme name string (e.g. 'nord'), or None.
    """
    return _load_config_dict().get("theme")


def load_log_file() -> str | None:
    """Return the log_file value from config.toml, or None if not set."""
    return _load_config_dict().get("log_file")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Arguments to parse. Defaults to sys.argv[1:].

    Returns:
        Parsed namespace with 'candidates', 'debug' and 'log_file' attributes.
    """
    parser = argparse.ArgumentParser(
        prog="typeahead-textual",
        description="A terminal demo of a keyboard-navigable typeahead input.",
    )
    parser.add_argument(
        "-c",
        "--candidates",
        help="Path to a file with one candidate per line.",
        default=None,
    )
    parser.add_argument(
        "--debug",
        help="Show the focused suggestion index and match count.",
        action="store_true",
    )
    parser.add_argument(
        "--log-file",
        help="Write debug logging to this file.",
        default=None,
    )
    return parser.parse_args(argv)


def _existing_path(raw: str, source: str) -> Path:
    path = Path(raw).expanduser().resolve()
    if not path.exists():
        print(f"Error: {source} not found: {path}", file=sys.stderr)
        sys.exit(1)
    return path


def resolve_candidates_file(cli_file: str | None = None) -> Path | None:
    """Resolve the candidates file using the priority chain.

    Args:
        cli_file: Value from the --candidates CLI argument, if provided.

    Returns:
        Resolved path to the candidates file, or None to use the built-in list.

    Raises:
        SystemExit: If a configured file does not exist.
    """
    # 1. CLI argument
    if cli_file:
        return _existing_path(cli_file, "candidates file")

    # 2. TYPEAHEAD_CANDIDATES environment variable
    env_file = os.environ.get("TYPEAHEAD_CANDIDATES")
    if env_file:
        return _existing_path(env_file, "TYPEAHEAD_CANDIDATES")

    # 3. config.toml
    toml_file = _load_config_dict().get("candidates_file")
    if toml_file:
        return _existing_path(toml_file, "candidates file from config.toml")

    return None


def load_candidates(path: Path) -> list[str]:
    """Read candidates from a text file, one per line.

    Surrounding whitespace and blank lines are dropped; repeated entries
    keep their first position.

    Args:
        path: The file to read (UTF-8).

    Returns:
        The candidate strings in file order.
    """
    seen: set[str] = set()
    candidates: list[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        entry = line.strip()
        if entry and entry not in seen:
            seen.add(entry)
            candidates.append(entry)
    return candidates


def configure_logging(log_file: str | None) -> None:
    """Send debug logging to *log_file*; do nothing when it is None.

    The terminal belongs to the UI, so there is never a console handler.
    """
    if not log_file:
        return
    path = Path(log_file).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=path,
        level=logging.DEBUG,
        format=_LOG_FORMAT,
        encoding="utf-8",
    )
