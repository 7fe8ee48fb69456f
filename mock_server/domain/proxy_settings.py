"""Upstream forwarding proxy settings (``--proxy-via``)."""

from dataclasses import dataclass
from typing import Optional

from mock_server.bootstrap.config import DEFAULT_PROXY_PORT


@dataclass(frozen=True)
class ProxySettings:
    """Host and port of the proxy that proxied requests are routed through."""

    host: Optional[str] = None
    port: Optional[int] = None

    @property
    def enabled(self) -> bool:
        return self.host is not None

    @classmethod
    def from_string(cls, config: str) -> "ProxySettings":
        """Parse ``host:port`` (or a bare ``host``) into proxy settings.

        The port is taken after the last colon and defaults to 80 when no
        colon is present. Raises ValueError for an empty host or a port that
        is not plain ASCII digits in the TCP range.
        """
        host, separator, raw_port = config.rpartition(":")
        if not separator:
            host, port = config, DEFAULT_PROXY_PORT
        else:
            if not (raw_port.isascii() and raw_port.isdigit()):
                raise ValueError(f"Invalid proxy port in {config!r}")
            port = int(raw_port)
            if port > 65535:
                raise ValueError(f"Proxy port out of range in {config!r}")
        if not host:
            raise ValueError(f"Missing proxy host in {config!r}")
        return cls(host, port)

    def __str__(self) -> str:
        if not self.enabled:
            return "(none)"
        return f"{self.host}:{self.port}"


NO_PROXY = ProxySettings()
