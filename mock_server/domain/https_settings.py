"""HTTPS listener settings derived from the command line."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class HttpsSettings:
    """TLS material for the HTTPS listener; ``NO_HTTPS`` when disabled."""

    port: Optional[int] = None
    keystore_path: Optional[str] = None
    keystore_password: Optional[str] = None
    truststore_path: Optional[str] = None
    truststore_password: Optional[str] = None
    need_client_auth: bool = False

    @property
    def enabled(self) -> bool:
        """Return True when an HTTPS port has been configured."""
        return self.port is not None

    @property
    def has_truststore(self) -> bool:
        return self.truststore_path is not None

    def __repr__(self) -> str:
        # Passwords never appear in the repr.
        if not self.enabled:
            return "HttpsSettings(disabled)"
        return (
            f"HttpsSettings(port={self.port}, keystore_path={self.keystore_path!r}, "
            f"truststore_path={self.truststore_path!r}, "
            f"need_client_auth={self.need_client_auth})"
        )


NO_HTTPS = HttpsSettings()
