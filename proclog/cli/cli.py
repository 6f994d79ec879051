#!/usr/bin/env python3
"""
Command-line interface for the process logger.
"""
import argparse
from typing import Dict, Optional, Sequence

from proclog import __version__


def build_logger_parser() -> argparse.ArgumentParser:
    """
    Create the ArgumentParser for the process logger.

    Numeric options default to None so that values from the YAML
    configuration apply unless a flag is given explicitly.

    Returns:
        argparse.ArgumentParser: parser with interval, output, duration,
        env and config-dir options.
    """
    parser = argparse.ArgumentParser(
        prog="proclog",
        description="Writes process CPU and memory usage to a CSV file",
    )
    parser.add_argument("-i", "--interval", type=str, default=None, metavar="SECONDS",
                        help="Sets the logging interval in seconds (default: 1)")
    parser.add_argument("-o", "--output", type=str, default=None, metavar="FILE",
                        help="Sets the output CSV file (default: process_usage.csv)")
    parser.add_argument("-d", "--duration", type=str, default=None, metavar="SECONDS",
                        help="Sets the maximum duration to run in seconds (default: 60)")
    parser.add_argument(
        "--env",
        type=str,
        default=None,
        help=(
            "Environment name for configuration override (e.g., 'dev'). "
            "Loads config_<env>.yaml in addition to the base config.yaml."
        ),
    )
    parser.add_argument("--config-dir", type=str, default=None, metavar="DIR",
                        help="Directory holding config.yaml (default: bundled config_yaml)")
    parser.add_argument("--version", action="version", version=f"Process Logger {__version__}")
    return parser


def parse_logger_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments.

    Args:
        argv: Argument list (default: sys.argv[1:])

    Returns:
        argparse.Namespace: parsed arguments
    """
    return build_logger_parser().parse_args(argv)


def config_overrides(args: argparse.Namespace) -> Dict[str, Optional[str]]:
    """Map parsed arguments onto ConfigLoader override keys"""
    return {
        "interval": args.interval,
        "output": args.output,
        "duration": args.duration,
    }
