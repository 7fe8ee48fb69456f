"""Cross-flag rules checked once, right after parsing."""

from typing import Callable, Optional

from mock_server.options.errors import InvalidConfiguration
from mock_server.options.flags import (
    DISABLE_REQUEST_JOURNAL,
    HTTPS_KEYSTORE,
    HTTPS_PORT,
    RECORD_MAPPINGS,
)
from mock_server.options.parser import ParsedOptionSet

InvariantCheck = Callable[[ParsedOptionSet], Optional[str]]


def keystore_requires_https_port(options: ParsedOptionSet) -> Optional[str]:
    """A keystore path is meaningless without an HTTPS port."""
    if options.has(HTTPS_KEYSTORE) and not options.has(HTTPS_PORT):
        return "HTTPS port number must be specified if specifying the keystore path"
    return None


def recording_requires_request_journal(options: ParsedOptionSet) -> Optional[str]:
    """Recording observes traffic through the request journal."""
    if options.has(RECORD_MAPPINGS) and options.has(DISABLE_REQUEST_JOURNAL):
        return "Request journal must be enabled to record stubs"
    return None


INVARIANT_CHECKS: tuple[InvariantCheck, ...] = (
    keystore_requires_https_port,
    recording_requires_request_journal,
)


def validate_options(
    options: ParsedOptionSet,
    checks: tuple[InvariantCheck, ...] = INVARIANT_CHECKS,
) -> None:
    """Raise InvalidConfiguration for the first violated invariant."""
    for check in checks:
        violation = check(options)
        if violation is not None:
            raise InvalidConfiguration(violation)
