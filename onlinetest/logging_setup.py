from __future__ import annotations
import logging


def setup_console_logging(level: int = logging.INFO) -> None:
    """
    Call once at app start. Prints session lifecycle logs to console.
    """
    root = logging.getLogger()
    if root.handlers:
        # already configured by uvicorn or pytest
        root.setLevel(level)
        return

    root.setLevel(level)
    h = logging.StreamHandler()
    fmt = logging.Formatter(
        "[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    h.setFormatter(fmt)
    root.addHandler(h)
    # requests/urllib3 connection chatter drowns out session logs
    logging.getLogger("urllib3").setLevel(logging.WARNING)
