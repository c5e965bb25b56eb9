# src/task_cli/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs exactly one command:
parse argv -> load tasks -> mutate -> save -> exit code.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from ..cli.bootstrap import create_initial_state
from ..cli.commands import registry
from ..config import Settings, get_settings
from ..errors import CommandError, quote
from ..logging_setup import level_from_name, setup_logging

logger = logging.getLogger(__name__)

HELP_FLAGS = ("-h", "--help")


def main(argv: Sequence[str] | None = None, *, settings: Settings | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    args = list(argv)

    if settings is None:
        settings = get_settings()
        setup_logging(
            console_level=level_from_name(settings.log_level),
            log_file=settings.log_file,
        )

    prog = settings.prog_name

    if not args or args[0] in HELP_FLAGS:
        print(registry.build_help(prog))
        return 0

    command, cmd_args = args[0], args[1:]
    if command not in registry:
        print(f"{prog}: invalid command {quote(command)}", file=sys.stderr)
        return 1

    state = create_initial_state(settings=settings)
    logger.debug("Running %s args=%r", command, cmd_args)

    try:
        output = registry.handle(state, command, cmd_args)
    except CommandError as exc:
        logger.debug("Command failed: %s", exc, exc_info=True)
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    except Exception:
        logger.exception("Unexpected failure in %s", command)
        raise

    if output is not None:
        print(output)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
