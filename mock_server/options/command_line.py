"""Validated, read-only settings built from the process command line."""

from dataclasses import dataclass
from typing import Optional, Sequence

from mock_server.domain.case_insensitive_key import CaseInsensitiveKey
from mock_server.domain.file_source import SingleRootFileSource
from mock_server.domain.https_settings import HttpsSettings
from mock_server.domain.proxy_settings import ProxySettings
from mock_server.options import settings
from mock_server.options.parser import ParsedOptionSet, format_usage, parse_arguments
from mock_server.options.summary import render_summary
from mock_server.options.validation import validate_options


@dataclass(frozen=True)
class CommandLineOptions:  # pylint: disable=too-many-instance-attributes
    """Every setting the mock server reads from its command line.

    Build instances with ``CommandLineOptions.from_args``; it parses,
    validates and resolves every value up front, so attribute access never
    fails afterwards.
    """

    option_set: ParsedOptionSet
    port_number: int
    bind_address: str
    https_settings: HttpsSettings
    proxy_url: Optional[str]
    proxy_host_header: Optional[str]
    preserve_host_header: bool
    browser_proxying_enabled: bool
    proxy_via: ProxySettings
    record_mappings_enabled: bool
    matching_headers: tuple[CaseInsensitiveKey, ...]
    files_root: SingleRootFileSource
    request_journal_disabled: bool
    verbose_logging_enabled: bool
    help_requested: bool
    help_text: Optional[str]

    @classmethod
    def from_args(cls, argv: Sequence[str]) -> "CommandLineOptions":
        """Parse and validate ``argv`` (without the program name)."""
        option_set = parse_arguments(argv)
        validate_options(option_set)
        return cls.from_option_set(option_set)

    @classmethod
    def from_option_set(cls, option_set: ParsedOptionSet) -> "CommandLineOptions":
        requested = settings.help_requested(option_set)
        return cls(
            option_set=option_set,
            port_number=settings.port_number(option_set),
            bind_address=settings.bind_address(option_set),
            https_settings=settings.https_settings(option_set),
            proxy_url=settings.proxy_url(option_set),
            proxy_host_header=settings.proxy_host_header(option_set),
            preserve_host_header=settings.preserve_host_header(option_set),
            browser_proxying_enabled=settings.browser_proxying_enabled(option_set),
            proxy_via=settings.proxy_via(option_set),
            record_mappings_enabled=settings.record_mappings_enabled(option_set),
            matching_headers=settings.matching_headers(option_set),
            files_root=settings.files_root(option_set),
            request_journal_disabled=settings.request_journal_disabled(option_set),
            verbose_logging_enabled=settings.verbose_logging_enabled(option_set),
            help_requested=requested,
            help_text=format_usage() if requested else None,
        )

    @property
    def specifies_proxy_url(self) -> bool:
        return self.proxy_url is not None

    @property
    def log_level(self) -> str:
        """Logging level the server should run with."""
        return "DEBUG" if self.verbose_logging_enabled else "INFO"

    def summary(self) -> str:
        return render_summary(self)

    def __str__(self) -> str:
        return self.summary()
