"""Logging setup for the pet service.

Three areas can be tuned independently through Settings: the uvicorn
server logs, the store's mutation log, and the per-request access /
rejection log written by the presentation layer.
"""

import logging
import sys

from pet_api.config import get_settings

# Settings field -> loggers it controls
_CATEGORY_MAP: dict[str, list[str]] = {
    "log_level_uvicorn": [
        "uvicorn",
        "uvicorn.access",
        "uvicorn.error",
    ],
    "log_level_store": [
        "pet_api.application.services.pet_store",
    ],
    "log_level_http": [
        "pet_api.presentation.api.request_logging",
        "pet_api.presentation.api.error_handlers",
    ],
}

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s — %(message)s"


def setup_logging() -> None:
    """Apply the configured levels. Called once from the app lifespan."""
    settings = get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    # uvicorn installs its own handlers; tests and scripts start with none
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)

    for settings_field, logger_names in _CATEGORY_MAP.items():
        level = _parse_level(getattr(settings, settings_field, "INFO"))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Log levels: root=%s uvicorn=%s store=%s http=%s",
        settings.log_level,
        settings.log_level_uvicorn,
        settings.log_level_store,
        settings.log_level_http,
    )


def _parse_level(raw: str) -> int:
    """Map a level name to its logging constant; unknown names mean INFO."""
    numeric = getattr(logging, raw.upper(), None)
    return numeric if isinstance(numeric, int) else logging.INFO
