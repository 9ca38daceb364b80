"""Command-line driver that prints a fully defaulted scheduler configuration."""

from __future__ import annotations

import argparse
import sys

from schedconf.cli.helpers import (
    OUTPUT_FORMATS,
    build_registry,
    configure_logging,
    default_document,
    describe_plugins,
    render,
)
from schedconf.config.env import load_environment
from schedconf.errors import (
    ConfigLoadError,
    FeatureGateError,
    SchedConfError,
    format_error,
)
from schedconf.utilities.version import get_runtime_version

EXIT_DEFAULTING_ERROR = 1
EXIT_USAGE_ERROR = 2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="schedconf",
        description="Fill in defaults for a kube-scheduler configuration.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=get_runtime_version(),
        help="Show the runtime version and exit.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (defaults to $SCHEDCONF_LOG_LEVEL or WARNING).",
    )
    parser.add_argument(
        "--structured-logs",
        action="store_true",
        help="Emit logs as JSON objects.",
    )
    parser.add_argument(
        "--feature-gates",
        default=None,
        metavar="NAME=BOOL,...",
        help="Feature gate overrides (defaults to $SCHEDCONF_FEATURE_GATES).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    default_parser = subparsers.add_parser(
        "default",
        help="Print the defaulted form of a configuration file.",
    )
    default_parser.add_argument(
        "config_path",
        type=str,
        help="Path to a KubeSchedulerConfiguration file (YAML or JSON).",
    )
    default_parser.add_argument(
        "--output",
        "-o",
        choices=OUTPUT_FORMATS,
        default="yaml",
        help="Output format.",
    )
    plugins_parser = subparsers.add_parser(
        "plugins",
        help="List default plugins and registered argument kinds.",
    )
    plugins_parser.add_argument(
        "--output",
        "-o",
        choices=OUTPUT_FORMATS,
        default="yaml",
        help="Output format.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point; returns the process exit code."""
    load_environment()
    args = parse_args(argv)
    logger_manager = configure_logging(args.log_level, args.structured_logs)
    logger = logger_manager.get_logger("cli")
    try:
        try:
            registry = build_registry(args.feature_gates)
        except FeatureGateError as exc:
            print(format_error(exc), file=sys.stderr)
            return EXIT_USAGE_ERROR

        if args.command == "plugins":
            print(render(describe_plugins(registry), args.output), end="")
            return 0

        try:
            document = default_document(args.config_path, registry, logger)
        except ConfigLoadError as exc:
            logger.error("Failed to load configuration: %s", exc)
            print(format_error(exc), file=sys.stderr)
            return EXIT_USAGE_ERROR
        except SchedConfError as exc:
            logger.error("Defaulting aborted: %s", exc)
            print(format_error(exc), file=sys.stderr)
            return EXIT_DEFAULTING_ERROR
        print(render(document, args.output), end="")
        return 0
    finally:
        logger_manager.shutdown()


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
