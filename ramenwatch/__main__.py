"""Command-line entrypoint for RamenWatch."""

from __future__ import annotations

import argparse
import logging
import sys

from ramenwatch import __version__
from ramenwatch.models.core.target import RegistryError, TargetRegistry
from ramenwatch.models.state.app_settings import (
    AppSettings,
    ConfigError,
    ConfigManager,
)
from ramenwatch.utils.logging_setup import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ramenwatch",
        description="Live dashboard for a Ramen DR hub and its two managed clusters",
    )
    parser.add_argument("--hub", help="Path to hub kubeconfig")
    parser.add_argument("--dr1", help="Path to dr1 kubeconfig")
    parser.add_argument("--dr2", help="Path to dr2 kubeconfig")
    parser.add_argument("--config", help="Optional YAML settings file")
    parser.add_argument(
        "--interval",
        type=float,
        help="Refresh interval in seconds (default 1)",
    )
    parser.add_argument("--log-file", help="Write logs to this file")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Log level (default WARNING)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_settings(args: argparse.Namespace) -> AppSettings:
    """Config file first, command-line flags on top."""
    settings = ConfigManager.load(args.config)
    return ConfigManager.apply_overrides(
        settings,
        hub_kubeconfig=args.hub,
        dr1_kubeconfig=args.dr1,
        dr2_kubeconfig=args.dr2,
        refresh_interval=args.interval,
        log_file=args.log_file,
        log_level=args.log_level,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = load_settings(args)
        registry = TargetRegistry.from_descriptors(
            settings.hub_kubeconfig,
            settings.dr1_kubeconfig,
            settings.dr2_kubeconfig,
        )
        configure_logging(settings)
    except (ConfigError, RegistryError, OSError) as exc:
        print(f"ramenwatch: {exc}", file=sys.stderr)
        return 1

    logger.info("Starting dashboard for %s", registry)

    from ramenwatch.app import RamenWatchApp

    app = RamenWatchApp(registry, settings=settings)
    try:
        app.run()
    except Exception as exc:
        logger.exception("Terminal UI failed")
        print(f"Alas, there's been an error: {exc}", file=sys.stderr)
        return 1
    return app.return_code or 0


if __name__ == "__main__":
    raise SystemExit(main())
