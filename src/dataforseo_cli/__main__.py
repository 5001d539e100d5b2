"""
dataforseo-cli Package Main Entry Point

This module serves as the entry point for the ``dataforseo-cli`` console
script and for ``python -m dataforseo_cli``.
"""

import logging
import sys

from dataforseo_cli.cli.common.error_handler import handle_cli_error
from dataforseo_cli.cli.typer_app import app
from dataforseo_cli.shared.constants import CLIDefaults, CLIHelp

logger = logging.getLogger(__name__)


def main() -> None:
    try:
        app(prog_name=CLIHelp.APP_NAME)
    except KeyboardInterrupt:
        logger.info("Command interrupted by user")
        sys.exit(CLIDefaults.EXIT_INTERRUPTED)
    except SystemExit:
        raise
    except Exception as e:  # noqa: BLE001
        exit_code = handle_cli_error(e, "dataforseo-cli-main")
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
