import argparse
import logging
from pathlib import Path

from evented.config import ConfigType

default_config = "production"
default_ticks = 3


def parse_log_level(value: str) -> int:
    """Accept a numeric level or a level name such as ``debug``."""
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise argparse.ArgumentTypeError(f"Invalid log level: {value}")
    return level


def parse_evented_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="evented")

    parser.add_argument(
        "--config",
        help="Configuration to run with. (default: %s)" % default_config,
        choices=[config_type.name.lower() for config_type in ConfigType],
        default=default_config,
        required=False,
    )
    parser.add_argument(
        "-l",
        "--log-level",
        help="Logging level int value or name (DEBUG: 10, INFO: 20, WARNING: 30, ERROR: 40, CRITICAL: 50). Overrides the level of --config.",
        type=parse_log_level,
        default=None,
        required=False,
    )
    parser.add_argument(
        "--log-dir",
        help="Directory to write log files to. (default: platform log folder)",
        type=Path,
        default=None,
        required=False,
    )
    parser.add_argument(
        "-n",
        "--ticks",
        help="Number of tick events the demo emits. (default: %d)" % default_ticks,
        type=int,
        default=default_ticks,
        required=False,
    )

    args = parser.parse_args(argv)

    config = ConfigType.from_name(args.config).value
    if args.log_level is None:
        args.log_level = config.LOG_LEVEL
    if args.log_dir is None:
        args.log_dir = config.LOG_DIR
    args.max_log_files = config.MAX_LOG_FILES

    return args
