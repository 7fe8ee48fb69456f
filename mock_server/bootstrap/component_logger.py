"""Logger adapter that tags records with the emitting component."""

import logging
from typing import Any, MutableMapping

LOGGER_NAME = "mock_server"


class ComponentLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that injects the component name into log records."""

    def process(
        self, msg: str, kwargs: MutableMapping[str, Any]
    ) -> tuple[str, MutableMapping[str, Any]]:
        """Add component to the extra dict."""
        if "extra" not in kwargs:
            kwargs["extra"] = {}
        else:
            kwargs["extra"] = dict(kwargs["extra"])

        logger_name = self.logger.name
        if logger_name.startswith(f"{LOGGER_NAME}."):
            component = logger_name[len(LOGGER_NAME) + 1 :]
        else:
            component = logger_name
        kwargs["extra"]["component"] = component

        return msg, kwargs


def get_logger(component: str) -> ComponentLoggerAdapter:
    """Return an adapter for ``mock_server.<component>``."""
    return ComponentLoggerAdapter(logging.getLogger(f"{LOGGER_NAME}.{component}"), {})
