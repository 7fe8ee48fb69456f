"""Mock HTTP server command-line entry point."""

import sys
from typing import Optional, Sequence, TextIO

from mock_server.bootstrap.component_logger import get_logger
from mock_server.bootstrap.config import log_destination, log_uses_json
from mock_server.bootstrap.logging_setup import configure_logging
from mock_server.options.command_line import CommandLineOptions
from mock_server.options.errors import OptionsError

STARTUP_LOGGER = get_logger("startup")


def report_invalid_options(error: OptionsError) -> None:
    """Log why startup must abort to the configured destination."""
    configure_logging("INFO", log_destination(), log_uses_json())
    STARTUP_LOGGER.critical(
        "Invalid command line",
        extra={"error": str(error), "error_type": type(error).__name__},
    )


def run(
    argv: Sequence[str],
    stdout: Optional[TextIO] = None,
    stderr: Optional[TextIO] = None,
) -> int:
    """Resolve options from ``argv`` and report them; return an exit code."""
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    try:
        options = CommandLineOptions.from_args(argv)
    except OptionsError as error:
        report_invalid_options(error)
        print(f"{type(error).__name__}: {error}", file=stderr)
        return 1

    if options.help_requested:
        stdout.write(options.help_text)
        return 0

    configure_logging(options.log_level, log_destination(), log_uses_json())
    STARTUP_LOGGER.info(
        "Resolved command line options",
        extra={
            "event": "options_resolved",
            "port": options.port_number,
            "bind_address": options.bind_address,
            "https_port": options.https_settings.port,
            "proxy_url": options.proxy_url,
            "proxy_via": str(options.proxy_via) if options.proxy_via.enabled else None,
            "root_dir": options.files_root.root,
            "record_mappings": options.record_mappings_enabled,
            "request_journal_disabled": options.request_journal_disabled,
            "verbose": options.verbose_logging_enabled,
        },
    )
    stdout.write(options.summary())
    return 0


def main() -> None:
    """Entry point for the ``mock-server`` console script."""
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
