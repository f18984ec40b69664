from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from pmrsync.app import PIPELINE_ORDER, Pipeline, run_sync
from pmrsync.config import configure_logging, get_app_config

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)

INTERRUPTED_EXIT_CODE = 128 + SIGINT

ALL_COMMAND = "all"


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Synchronise password-manager-resources quirks into Remote Settings"
    )
    parser.add_argument(
        "command",
        nargs="?",
        default=ALL_COMMAND,
        choices=[ALL_COMMAND, *(str(pipeline) for pipeline in PIPELINE_ORDER)],
        help="Collection to synchronise (default: %(default)s)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Fetch and reconcile, but only log the planned writes",
    )
    return parser.parse_args(list(argv))


def _selected_pipelines(command: str) -> tuple[Pipeline, ...]:
    if command == ALL_COMMAND:
        return PIPELINE_ORDER
    return (Pipeline(command),)


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    configure_logging()
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        config = get_app_config()
        run_sync(
            config,
            pipelines=_selected_pipelines(parsed_args.command),
            dry_run=parsed_args.dry_run,
        )
    except Exception:
        log.exception("Fatal error during sync")
        sys.exit(1)

    log.info("Script finished successfully!")


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Stop on SIGINT (Ctrl+C) with the conventional 128 + signal exit status."""
    log.warning("Interrupted by user (Ctrl+C)")
    sys.exit(INTERRUPTED_EXIT_CODE)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
