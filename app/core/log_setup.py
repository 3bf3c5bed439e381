from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> logging.Logger:
    resolved = getattr(logging, str(level or "INFO").strip().upper(), logging.INFO)
    logger = logging.getLogger("app")
    logger.setLevel(resolved)

    # Avoid duplicate console handlers on reload / repeated app creation.
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    logger.propagate = False
    return logger
