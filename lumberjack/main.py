#!/usr/bin/env python3
"""
Lumberjack - Main Entry Point
Run the Lumberjack terminal UI
"""
import argparse
import logging
import sys
import traceback

from pydantic import ValidationError

from lumberjack.app_logging import configure_logging
from lumberjack.config import load_settings

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="lumberjack",
        description="Browse and tail CloudWatch Logs from the terminal.",
    )
    parser.add_argument("--region", help="AWS region (default: $AWS_REGION or eu-west-1)")
    parser.add_argument("--profile", help="AWS profile name (default: $AWS_PROFILE)")
    parser.add_argument("--poll-interval", type=float, help="Seconds between tail polls (default: 3)")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        settings = load_settings(args.region, args.profile, args.poll_interval)
    except ValidationError as e:
        print(f"Invalid configuration:\n{e}", file=sys.stderr)
        return 2

    log_file = configure_logging(settings.log_dir, settings.log_level)
    logger.info(f"Starting Lumberjack (region={settings.region}, profile={settings.profile})")

    # Import late so configuration errors are reported before Textual starts
    from lumberjack.UI import run_app

    try:
        run_app(settings)
    except KeyboardInterrupt:
        print("\nLumberjack terminated by user")
    except Exception as e:
        logger.error(f"Unhandled error: {e}", exc_info=True)
        print(f"\nError running Lumberjack: {e} (see {log_file})")
        traceback.print_exc()
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
