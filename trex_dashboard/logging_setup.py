from __future__ import annotations
import logging
from trex_dashboard import config

# Chatty third-party loggers kept at WARNING regardless of the app level.
QUIET_LOGGERS = ("urllib3", "fsspec", "watchdog")

def setup_logging(level: str | None = None) -> int:
    """Configure root logging for the dashboard; returns the numeric level applied.

    Streamlit reruns the script on every interaction, so repeated calls only
    re-apply the level instead of stacking handlers.
    """
    numeric = getattr(logging, (level or config.LOG_LEVEL).upper(), logging.INFO)
    logging.basicConfig(level=numeric, format=config.LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    logging.getLogger().setLevel(numeric)
    logging.getLogger("trex_dashboard").setLevel(numeric)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric, logging.WARNING))
    return numeric
