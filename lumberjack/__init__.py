"""
Lumberjack - Terminal browser for remote, paginated log stores.

Select a CloudWatch Logs group, enter a time window and a filter, read the
matching events, and optionally keep tailing new events as they arrive.

Package Structure:
    - engine/: Query/tail engine (time and filter translation, paginated
      fetching, tail polling, search sessions)
    - store/: Remote log store interface and the CloudWatch adapter
    - presets/: Saved filter presets
    - UI/: Textual application
    - config.py / app_logging.py: Settings and logging setup
    - main.py: Command-line entry point

Usage:
    lumberjack --region=eu-west-1 --profile=dev
"""

__version__ = "0.1.0"
