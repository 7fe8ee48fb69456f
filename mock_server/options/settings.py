"""Pure derivations from a parsed option set to typed settings values.

Every function here is total for input that passed validation, except for
the coercions (ports and URLs) which raise InvalidConfiguration. Callers
run them all eagerly at construction so that a bad value never surfaces
after startup.
"""

from typing import Optional
from urllib.parse import urlsplit

from mock_server.bootstrap.config import (
    DEFAULT_BIND_ADDRESS,
    DEFAULT_KEYSTORE_PATH,
    DEFAULT_PORT,
    DEFAULT_STORE_PASSWORD,
)
from mock_server.domain.case_insensitive_key import (
    CaseInsensitiveKey,
    to_case_insensitive_keys,
)
from mock_server.domain.file_source import SingleRootFileSource
from mock_server.domain.https_settings import NO_HTTPS, HttpsSettings
from mock_server.domain.proxy_settings import NO_PROXY, ProxySettings
from mock_server.options.errors import InvalidConfiguration
from mock_server.options.flags import (
    BIND_ADDRESS,
    DISABLE_REQUEST_JOURNAL,
    ENABLE_BROWSER_PROXYING,
    HELP,
    HTTPS_KEYSTORE,
    HTTPS_KEYSTORE_PASS,
    HTTPS_NEED_CLIENT_AUTH,
    HTTPS_PORT,
    HTTPS_TRUSTSTORE,
    HTTPS_TRUSTSTORE_PASS,
    MATCH_HEADERS,
    PORT,
    PRESERVE_HOST_HEADER,
    PROXY_ALL,
    PROXY_VIA,
    RECORD_MAPPINGS,
    ROOT_DIR,
    VERBOSE,
)
from mock_server.options.parser import ParsedOptionSet

MAX_PORT = 65535


def _parse_port(name: str, raw: Optional[str]) -> int:
    if raw is None or not (raw.isascii() and raw.isdigit()):
        raise InvalidConfiguration(f"--{name} must be an integer, got {raw!r}")
    port = int(raw)
    if port > MAX_PORT:
        raise InvalidConfiguration(f"--{name} must be between 0 and {MAX_PORT}")
    return port


def _parse_bool(raw: Optional[str]) -> bool:
    return raw is not None and raw.lower() == "true"


def _host_of(url: str) -> Optional[str]:
    parts = urlsplit(url)
    if not parts.hostname:
        return None
    authority = parts.netloc.rpartition("@")[2]
    if authority.startswith("["):
        return authority[: authority.index("]") + 1]
    return authority.partition(":")[0]


def _check_url(name: str, url: str) -> None:
    if any(char.isspace() for char in url):
        raise InvalidConfiguration(f"--{name} is not a valid URL: {url!r}")
    try:
        parts = urlsplit(url)
        # Accessing port validates it.
        parts.port  # pylint: disable=pointless-statement
    except ValueError as error:
        raise InvalidConfiguration(f"--{name} is not a valid URL: {url!r}") from error


def port_number(options: ParsedOptionSet) -> int:
    if options.has(PORT):
        return _parse_port(PORT, options.value_of(PORT))
    return DEFAULT_PORT


def bind_address(options: ParsedOptionSet) -> str:
    if options.has(BIND_ADDRESS):
        return options.value_of(BIND_ADDRESS)
    return DEFAULT_BIND_ADDRESS


def https_settings(options: ParsedOptionSet) -> HttpsSettings:
    """Build HTTPS settings, falling back to the bundled keystore."""
    if not options.has(HTTPS_PORT):
        return NO_HTTPS

    https_port = _parse_port(HTTPS_PORT, options.value_of(HTTPS_PORT))
    if options.has(HTTPS_KEYSTORE):
        return HttpsSettings(
            port=https_port,
            keystore_path=options.value_of(HTTPS_KEYSTORE),
            keystore_password=options.value_of(HTTPS_KEYSTORE_PASS),
            truststore_path=options.value_of(HTTPS_TRUSTSTORE),
            truststore_password=options.value_of(HTTPS_TRUSTSTORE_PASS),
            need_client_auth=_parse_bool(options.value_of(HTTPS_NEED_CLIENT_AUTH)),
        )

    return HttpsSettings(
        port=https_port,
        keystore_path=DEFAULT_KEYSTORE_PATH,
        keystore_password=DEFAULT_STORE_PASSWORD,
    )


def proxy_url(options: ParsedOptionSet) -> Optional[str]:
    url = options.value_of(PROXY_ALL)
    if url is not None:
        _check_url(PROXY_ALL, url)
    return url


def proxy_host_header(options: ParsedOptionSet) -> Optional[str]:
    """Return the host component of the proxy-all target.

    Relative targets such as ``example.org`` or host-less ones such as
    ``file:///tmp/x`` are accepted and have no host header.
    """
    url = proxy_url(options)
    return _host_of(url) if url is not None else None


def preserve_host_header(options: ParsedOptionSet) -> bool:
    return options.has(PRESERVE_HOST_HEADER)


def browser_proxying_enabled(options: ParsedOptionSet) -> bool:
    return options.has(ENABLE_BROWSER_PROXYING)


def proxy_via(options: ParsedOptionSet) -> ProxySettings:
    if not options.has(PROXY_VIA):
        return NO_PROXY
    try:
        return ProxySettings.from_string(options.value_of(PROXY_VIA))
    except ValueError as error:
        raise InvalidConfiguration(f"--{PROXY_VIA}: {error}") from error


def record_mappings_enabled(options: ParsedOptionSet) -> bool:
    return options.has(RECORD_MAPPINGS)


def matching_headers(options: ParsedOptionSet) -> tuple[CaseInsensitiveKey, ...]:
    """Split the match-headers value on commas, keeping every token as given."""
    if not options.has_argument(MATCH_HEADERS):
        return ()
    return to_case_insensitive_keys(options.value_of(MATCH_HEADERS).split(","))


def files_root(options: ParsedOptionSet) -> SingleRootFileSource:
    return SingleRootFileSource(options.value_of(ROOT_DIR))


def request_journal_disabled(options: ParsedOptionSet) -> bool:
    return options.has(DISABLE_REQUEST_JOURNAL)


def verbose_logging_enabled(options: ParsedOptionSet) -> bool:
    return options.has(VERBOSE)


def help_requested(options: ParsedOptionSet) -> bool:
    return options.has(HELP)
