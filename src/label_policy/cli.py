from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .config import load_settings
from .exceptions import ConfigError, EmptyValuesError
from .labels.policy import PolicySettings
from .telemetry import init_logging


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Validate label policy settings")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("path", nargs="?", default=None, help="Settings YAML file")
    source.add_argument(
        "--keys",
        nargs="+",
        metavar="KEY",
        help="Validate these keys instead of loading a settings file",
    )
    parser.add_argument("--log-level", default="WARNING", help="Level for structured validation events")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logger = init_logging({"log_level": args.log_level})

    try:
        if args.keys:
            settings = PolicySettings(values=set(args.keys))
            source = "cli"
        else:
            settings = load_settings(args.path)
            source = "settings"
        report = settings.validate_settings()
    except (ConfigError, EmptyValuesError) as exc:
        print(f"Settings invalid: {exc}")
        return 1

    logger.validation_event(report, key_count=len(settings.values), source=source)
    if not report.ok:
        print(report.message())
        return 1

    print("Settings valid")
    return 0


if __name__ == "__main__":
    sys.exit(main())
