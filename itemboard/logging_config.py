# itemboard/logging_config.py

import logging


def setup_logging(level: str = "INFO") -> None:
    """
    Attach a console handler to the root logger, once.
    """
    root = logging.getLogger()
    if root.handlers:
        # uvicorn or pytest may already have configured it
        return

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
