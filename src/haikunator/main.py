"""Haikunator command-line entry point."""

import logging
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .core import Haikunator, HaikunatorError, load_config, load_settings
from .core.settings import find_config_file

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)

USAGE = "Usage: haikunator [-n COUNT] [-c CONFIG] [-d DELIM] [-l LENGTH] [--hex] [--chars CHARS] [-s SEED]"

# Option -> (destination, takes a value)
OPTIONS = {
    "-n": ("count", True),
    "--count": ("count", True),
    "-c": ("config", True),
    "--config": ("config", True),
    "-d": ("delimiter", True),
    "--delimiter": ("delimiter", True),
    "-l": ("token_length", True),
    "--length": ("token_length", True),
    "--hex": ("token_hex", False),
    "--chars": ("token_chars", True),
    "-s": ("seed", True),
    "--seed": ("seed", True),
    "-h": ("help", False),
    "--help": ("help", False),
}


class UsageError(Exception):
    """Bad command-line arguments."""

    pass


def parse_args(args: list[str]) -> dict:
    """Parse command-line arguments.

    Returns:
        Dict of option destinations to values. ``count`` is always present.

    Raises:
        UsageError: On unknown options, missing values or bad numbers
    """
    options: dict = {"count": 1}

    i = 0
    while i < len(args):
        arg = args[i]
        if arg not in OPTIONS:
            raise UsageError(f"Unknown option: {arg}")

        dest, takes_value = OPTIONS[arg]
        if not takes_value:
            options[dest] = True
            i += 1
            continue

        if i + 1 >= len(args):
            raise UsageError(f"Option {arg} requires a value")
        options[dest] = args[i + 1]
        i += 2

    for dest in ("count", "token_length", "seed"):
        if dest in options:
            try:
                options[dest] = int(options[dest])
            except ValueError:
                raise UsageError(f"Expected an integer for {dest}, got {options[dest]!r}")

    if options["count"] < 0:
        raise UsageError(f"Count must be >= 0, got {options['count']}")

    return options


def setup_logging(config: dict) -> None:
    """Set up logging configuration."""
    log_config = config.get("logging") or {}
    level = getattr(logging, str(log_config.get("level", "WARNING")).upper(), logging.WARNING)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("haikunator").setLevel(level)


def print_help() -> None:
    """Print help message."""
    print("""Haikunator - heroku-like random names

Usage:
    haikunator [options]
    python -m haikunator [options]

Options:
    -n, --count N           Number of names to print (default: 1)
    -c, --config PATH       YAML config file
    -d, --delimiter DELIM   Delimiter between segments (default: -)
    -l, --length N          Token length (default: 4)
    --hex                   Use a hexadecimal token
    --chars CHARS           Token alphabet (default: 0123456789)
    -s, --seed N            Seed the random source for reproducible names
    -h, --help              Show this message

Environment:
    HAIKUNATOR_DELIMITER, HAIKUNATOR_TOKEN_LENGTH, HAIKUNATOR_TOKEN_HEX,
    HAIKUNATOR_TOKEN_CHARS, HAIKUNATOR_SEED

Examples:
    haikunator
    haikunator -n 5 --hex -l 8
    haikunator -d . --chars 0123456789忠犬ハチ公
""")


def run(args: list[str]) -> int:
    """Run the CLI and return an exit code."""
    if args and args[0] == "help":
        print_help()
        return 0

    try:
        options = parse_args(args)
    except UsageError as e:
        print(f"Error: {e}", file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 2

    if options.pop("help", False):
        print_help()
        return 0

    count = options.pop("count")
    config_path: Optional[str] = options.pop("config", None)

    try:
        config_file = Path(config_path) if config_path else find_config_file()
        config = load_config(config_file) if config_file else {}
        setup_logging(config)
        if config_file:
            logger.info(f"Loaded config from {config_file}")
        else:
            logger.info("No config file found, using defaults")
        settings = load_settings(config, overrides=options)
        haikunator = Haikunator(settings.to_params())
    except HaikunatorError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for _ in range(count):
        print(haikunator.generate())

    return 0


def main() -> None:
    """Main entry point."""
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
