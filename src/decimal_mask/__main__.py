"""Entry point for decimal-mask."""

from pathlib import Path

from decimal_mask.app import DecimalMaskApp
from decimal_mask.config import (
    load_log_settings,
    parse_args,
    resolve_mask_config,
    resolve_placeholder,
)
from decimal_mask.logging import configure_logging


def main() -> None:
    """Run the decimal-mask application."""
    args = parse_args()
    level, log_file = load_log_settings()
    configure_logging(
        level=args.log_level or level,
        log_file=Path(args.log_file).expanduser() if args.log_file else log_file,
    )
    app = DecimalMaskApp(
        config=resolve_mask_config(args),
        placeholder=resolve_placeholder(args),
    )
    app.run()


if __name__ == "__main__":
    main()
