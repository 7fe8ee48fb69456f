"""Human-readable report of the effective command-line configuration."""

from typing import TYPE_CHECKING, Any, Iterator

from mock_server.options.flags import (
    DISABLE_REQUEST_JOURNAL,
    ENABLE_BROWSER_PROXYING,
    HTTPS_KEYSTORE,
    HTTPS_PORT,
    MATCH_HEADERS,
    PORT,
    PRESERVE_HOST_HEADER,
    PROXY_ALL,
    PROXY_VIA,
    RECORD_MAPPINGS,
    VERBOSE,
)

if TYPE_CHECKING:
    from mock_server.options.command_line import CommandLineOptions

NAME_WIDTH = 29
NULL_TEXT = "(null)"


def format_value(value: Any) -> str:
    """Render a setting value the way the summary prints it."""
    if value is None:
        return NULL_TEXT
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(format_value(item) for item in value) + "]"
    return str(value)


def format_line(name: str, value: Any) -> str:
    padding = " " * max(NAME_WIDTH - len(name), 0)
    return f"{name}:{padding}{format_value(value)}\n"


def summary_entries(options: "CommandLineOptions") -> Iterator[tuple[str, Any]]:
    """Yield (name, value) pairs in report order, skipping disabled groups."""
    yield PORT, options.port_number

    https = options.https_settings
    if https.enabled:
        yield HTTPS_PORT, https.port
        yield HTTPS_KEYSTORE, https.keystore_path

    if options.proxy_via.enabled:
        yield PROXY_VIA, options.proxy_via

    if options.proxy_url is not None:
        yield PROXY_ALL, options.proxy_url
        yield PRESERVE_HOST_HEADER, options.preserve_host_header

    yield ENABLE_BROWSER_PROXYING, options.browser_proxying_enabled

    if options.record_mappings_enabled:
        yield RECORD_MAPPINGS, options.record_mappings_enabled
        yield MATCH_HEADERS, options.matching_headers

    yield DISABLE_REQUEST_JOURNAL, options.request_journal_disabled
    yield VERBOSE, options.verbose_logging_enabled


def render_summary(options: "CommandLineOptions") -> str:
    return "".join(format_line(name, value) for name, value in summary_entries(options))
