"""Command line entry point: create_config, base_key, cloak_key, check, setup."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence

from .bootstrapper import ConfigBootstrapper
from .config import get_settings
from .errors import BootstrapError
from .keys import MANAGED_KEYS, ManagedKey

logger = logging.getLogger("wanderer_conf.cli")


def configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format="%(levelname)s %(message)s")


def handle_create_config(bootstrapper: ConfigBootstrapper, args: argparse.Namespace) -> int:
    bootstrapper.initialize_config(overwrite=not args.keep_existing)
    return 0


def handle_rotate(key: ManagedKey) -> Callable[[ConfigBootstrapper, argparse.Namespace], int]:
    def handler(bootstrapper: ConfigBootstrapper, args: argparse.Namespace) -> int:
        bootstrapper.rotate(key)
        print(f"{key.name} updated in {bootstrapper.config_path}")
        return 0

    return handler


def handle_check(bootstrapper: ConfigBootstrapper, args: argparse.Namespace) -> int:
    statuses = bootstrapper.check()
    for status in statuses:
        print(f"{status.key.name}: {status.state}")
    return 0 if all(status.is_ok for status in statuses) else 1


def handle_setup(bootstrapper: ConfigBootstrapper, args: argparse.Namespace) -> int:
    rotated = bootstrapper.setup(overwrite=args.force)
    if rotated:
        print(f"Generated {', '.join(rotated)} in {bootstrapper.config_path}")
    else:
        print(f"No placeholder keys left in {bootstrapper.config_path}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wanderer-conf",
        description="Create wanderer-conf.env from its sample and generate its secrets.",
    )
    parser.add_argument("--config", type=Path, help="Config file to create or patch")
    parser.add_argument("--template", type=Path, help="Sample config copied by create_config")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    create_parser = subparsers.add_parser("create_config", help="Copy the sample config into place")
    create_parser.add_argument(
        "--keep-existing",
        action="store_true",
        help="Leave an existing config file untouched instead of overwriting it",
    )
    create_parser.set_defaults(handler=handle_create_config)

    for key in MANAGED_KEYS:
        rotate_parser = subparsers.add_parser(
            key.command, help=f"Replace {key.name} with {key.byte_length} random bytes, base64 encoded"
        )
        rotate_parser.set_defaults(handler=handle_rotate(key))

    check_parser = subparsers.add_parser("check", help="Report whether the managed keys hold real secrets")
    check_parser.set_defaults(handler=handle_check)

    setup_parser = subparsers.add_parser(
        "setup", help="Create the config if missing and generate every placeholder secret"
    )
    setup_parser.add_argument("--force", action="store_true", help="Recopy the sample even if the config exists")
    setup_parser.set_defaults(handler=handle_setup)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(args.log_level or settings.LOG_LEVEL)

    bootstrapper = ConfigBootstrapper(template_path=args.template, config_path=args.config)
    try:
        return args.handler(bootstrapper, args)
    except BootstrapError as exc:
        logger.error("%s failed: %s", args.command, exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
