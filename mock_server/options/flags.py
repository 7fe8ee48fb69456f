"""Declarations of every command-line flag the mock server accepts."""

from dataclasses import dataclass
from typing import Optional

from mock_server.bootstrap.config import (
    DEFAULT_ROOT_DIR,
    DEFAULT_STORE_PASSWORD,
    FILES_ROOT,
    MAPPINGS_ROOT,
)

HELP = "help"
RECORD_MAPPINGS = "record-mappings"
MATCH_HEADERS = "match-headers"
PROXY_ALL = "proxy-all"
PRESERVE_HOST_HEADER = "preserve-host-header"
PROXY_VIA = "proxy-via"
PORT = "port"
BIND_ADDRESS = "bind-address"
HTTPS_PORT = "https-port"
HTTPS_KEYSTORE = "https-keystore"
HTTPS_KEYSTORE_PASS = "https-keystore-pass"
HTTPS_TRUSTSTORE = "https-truststore"
HTTPS_TRUSTSTORE_PASS = "https-truststore-pass"
HTTPS_NEED_CLIENT_AUTH = "https-need-client-auth"
VERBOSE = "verbose"
ENABLE_BROWSER_PROXYING = "enable-browser-proxying"
DISABLE_REQUEST_JOURNAL = "no-request-journal"
ROOT_DIR = "root-dir"


@dataclass(frozen=True)
class FlagDeclaration:
    """A single recognised flag and its value policy."""

    name: str
    description: str
    takes_value: bool = False
    value_required: bool = False
    default: Optional[str] = None

    @property
    def option_string(self) -> str:
        return f"--{self.name}"

    @property
    def dest(self) -> str:
        return self.name.replace("-", "_")


def _switch(name: str, description: str) -> FlagDeclaration:
    return FlagDeclaration(name, description)


def _required(
    name: str, description: str, default: Optional[str] = None
) -> FlagDeclaration:
    return FlagDeclaration(name, description, True, True, default)


def _optional(
    name: str, description: str, default: Optional[str] = None
) -> FlagDeclaration:
    return FlagDeclaration(name, description, True, False, default)


FLAGS: tuple[FlagDeclaration, ...] = (
    _required(PORT, "The port number for the server to listen on"),
    _required(
        HTTPS_PORT,
        "If this option is present the server will enable HTTPS on the "
        "specified port",
    ),
    _required(BIND_ADDRESS, "The IP address to listen for connections on"),
    _required(HTTPS_KEYSTORE, "Path to an alternative keystore for HTTPS"),
    _optional(
        HTTPS_KEYSTORE_PASS,
        'Keystore password. The default password is "password".',
        DEFAULT_STORE_PASSWORD,
    ),
    _optional(HTTPS_TRUSTSTORE, "Path to a truststore for HTTPS"),
    _optional(
        HTTPS_TRUSTSTORE_PASS,
        'Truststore password. The default password is "password".',
        DEFAULT_STORE_PASSWORD,
    ),
    _optional(
        HTTPS_NEED_CLIENT_AUTH,
        "Whether HTTPS clients must present a certificate. The default "
        "value is false",
        "false",
    ),
    _required(
        PROXY_ALL, "Will create a proxy mapping for /* to the specified URL"
    ),
    _switch(
        PRESERVE_HOST_HEADER,
        "Will transfer the original host header from the client to the "
        "proxied service",
    ),
    _required(
        PROXY_VIA,
        "Specifies a proxy server to use when routing proxy mapped requests",
    ),
    _switch(
        RECORD_MAPPINGS,
        "Enable recording of all (non-admin) requests as mapping files",
    ),
    _required(
        MATCH_HEADERS,
        "Enable request header matching when recording through a proxy",
    ),
    _required(
        ROOT_DIR,
        "Specifies path for storing recordings (parent for "
        f"{MAPPINGS_ROOT} and {FILES_ROOT} folders)",
        DEFAULT_ROOT_DIR,
    ),
    _switch(VERBOSE, "Enable verbose logging to stdout"),
    _switch(
        ENABLE_BROWSER_PROXYING,
        "Allow the server to be set as a browser's proxy server",
    ),
    _switch(
        DISABLE_REQUEST_JOURNAL,
        "Disable the request journal (to avoid heap growth when running "
        "the server for long periods without reset)",
    ),
    _switch(HELP, "Print this message"),
)

FLAGS_BY_NAME: dict[str, FlagDeclaration] = {flag.name: flag for flag in FLAGS}
