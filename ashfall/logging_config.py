import logging
import os


def configure_logging(default_level: int = logging.INFO, level_name: str | None = None) -> None:
    """Configure the root logger.

    An explicit level_name wins, then the ASHFALL_LOG_LEVEL env var, then default_level.
    """
    level_name = level_name or os.getenv("ASHFALL_LOG_LEVEL")
    level = default_level
    if level_name:
        level = getattr(logging, level_name.upper(), default_level)
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
    )
