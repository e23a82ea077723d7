"""Configuration resolution for decimal-mask.

Priority order (highest to lowest):
1. Command-line flags (--prefix, --suffix, ...)
2. ~/.config/decimal-mask/config.toml -> [mask] section
3. MaskConfig defaults
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from decimal_mask.models import MaskConfig

_CONFIG_PATH = Path.home() / ".config" / "decimal-mask" / "config.toml"

# config.toml key -> MaskConfig field converter.
_MASK_FIELDS: dict[str, type] = {
    "prefix": str,
    "suffix": str,
    "max_value": float,
    "max_integer_digits": int,
    "max_decimal_digits": int,
}


def _load_config_dict() -> dict:
    """Load the full config.toml as a dict, or return empty dict on failure."""
    if not _CONFIG_PATH.exists():
        return {}
    try:
        if sys.version_info >= (3, 11):
            import tomllib
        else:
            import tomli as tomllib

        with open(_CONFIG_PATH, "rb") as f:
            return tomllib.load(f)
    except Exception:
        return {}


def load_mask_settings() -> dict:
    """Return the ``[mask]`` section of config.toml.

    Example config.toml::

        [mask]
        prefix = "R$"
        max_decimal_digits = 2
        placeholder = "Amount"

    Returns:
        The section as a dict, empty when the file or section is missing.
    """
    section = _load_config_dict().get("mask", {})
    return dict(section) if isinstance(section, dict) else {}


def load_log_settings() -> tuple[str, Path | None]:
    """Return the ``log_level`` and ``log_file`` keys of config.toml.

    Returns:
        The level name (``"WARNING"`` if unset) and the log file path, if any.
    """
    data = _load_config_dict()
    log_file = data.get("log_file")
    return str(data.get("log_level", "WARNING")), (
        Path(log_file).expanduser() if log_file else None
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv: Arguments to parse. Defaults to sys.argv[1:].

    Returns:
        Parsed namespace; options that were not given are None.
    """
    parser = argparse.ArgumentParser(
        prog="decimal-mask",
        description="Type a masked decimal value in the terminal.",
    )
    parser.add_argument("--prefix", help="Text shown before the number.")
    parser.add_argument("--suffix", help="Text shown after the number.")
    parser.add_argument("--max-value", type=float, help="Largest accepted value.")
    parser.add_argument(
        "--max-integer-digits", type=int, help="Integer digits shown (default 15)."
    )
    parser.add_argument(
        "--max-decimal-digits", type=int, help="Fractional digits (default 15)."
    )
    parser.add_argument(
        "--placeholder", help="Hint shown instead of a zero value."
    )
    parser.add_argument("--log-level", help="Log level, e.g. DEBUG.")
    parser.add_argument("--log-file", help="Write logs to this file.")
    return parser.parse_args(argv)


def resolve_mask_config(args: argparse.Namespace | None = None) -> MaskConfig:
    """Build the MaskConfig from CLI flags layered over config.toml.

    Args:
        args: Parsed CLI arguments, if any.

    Returns:
        The resolved configuration.

    Raises:
        SystemExit: If a configured value is invalid.
    """
    settings = load_mask_settings()
    values: dict = {}
    for key, convert in _MASK_FIELDS.items():
        raw = getattr(args, key, None) if args is not None else None
        if raw is None:
            raw = settings.get(key)
        if raw is None:
            continue
        try:
            values[key] = convert(raw)
        except (TypeError, ValueError):
            print(f"Error: invalid {key}: {raw!r}", file=sys.stderr)
            sys.exit(1)

    try:
        return MaskConfig(**values)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


def resolve_placeholder(args: argparse.Namespace | None = None) -> str:
    """Return the placeholder from the CLI, else config.toml, else empty."""
    if args is not None and args.placeholder is not None:
        return args.placeholder
    return str(load_mask_settings().get("placeholder", ""))
