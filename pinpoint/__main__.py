"""
Pinpoint entry point.

Usage:
    python -m pinpoint
    python -m pinpoint --screenshot shot.png --loglevel DEBUG
    python -m pinpoint --no-log-viewer
"""

import sys
import argparse

from .logging import DEFAULT_LOG_FILE


def main():
    """Main entry point for Pinpoint."""
    parser = argparse.ArgumentParser(
        description="Pinpoint - send feedback with a screenshot and logs"
    )
    parser.add_argument(
        "--screenshot",
        help="Image file to attach (default: grab the primary screen)"
    )
    parser.add_argument(
        "--no-logs",
        action="store_true",
        help="Do not offer log collection"
    )
    parser.add_argument(
        "--no-log-viewer",
        action="store_true",
        help="Offer log collection without the log viewer"
    )
    parser.add_argument(
        "-l", "--loglevel",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help=f"Set logging level (default: WARNING). DEBUG writes to {DEFAULT_LOG_FILE}"
    )
    parser.add_argument(
        "--logfile",
        default=DEFAULT_LOG_FILE,
        help=f"Log file path, also the file whose tail is attached (default: {DEFAULT_LOG_FILE})"
    )
    parser.add_argument(
        "--log-console",
        action="store_true",
        help="Also log to console (stderr)"
    )

    args = parser.parse_args()

    # Setup logging before importing anything else
    from .logging import setup_logging
    setup_logging(
        level=args.loglevel,
        log_file=args.logfile,
        console=args.log_console
    )

    # Import here to avoid slow startup for --help
    from .gui.app import run_app

    sys.exit(run_app(
        screenshot_path=args.screenshot,
        log_file=args.logfile,
        with_logs=not args.no_logs,
        with_log_viewer=not args.no_log_viewer,
    ))


if __name__ == "__main__":
    main()
