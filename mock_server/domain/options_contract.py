"""Read-only settings surface consumed by the server and its subsystems."""

from typing import Optional, Protocol, runtime_checkable

from mock_server.domain.case_insensitive_key import CaseInsensitiveKey
from mock_server.domain.file_source import SingleRootFileSource
from mock_server.domain.https_settings import HttpsSettings
from mock_server.domain.proxy_settings import ProxySettings


@runtime_checkable
class Options(Protocol):
    """Settings every server bootstrap can rely on."""

    @property
    def port_number(self) -> int: ...

    @property
    def bind_address(self) -> str: ...

    @property
    def https_settings(self) -> HttpsSettings: ...

    @property
    def proxy_url(self) -> Optional[str]: ...

    @property
    def proxy_host_header(self) -> Optional[str]: ...

    @property
    def preserve_host_header(self) -> bool: ...

    @property
    def browser_proxying_enabled(self) -> bool: ...

    @property
    def proxy_via(self) -> ProxySettings: ...

    @property
    def matching_headers(self) -> tuple[CaseInsensitiveKey, ...]: ...

    @property
    def files_root(self) -> SingleRootFileSource: ...

    @property
    def request_journal_disabled(self) -> bool: ...
