"""
Logging configuration shared by the server and the dashboard client.
"""

import logging
import sys

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(component_name: str, level: int | str = logging.INFO) -> logging.Logger:
    """
    Configure the root logger for one component.

    Args:
        component_name: Component identifier ('server' or 'client')
        level: Logging level, as a number or a name like "DEBUG"

    Returns:
        The component logger
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logging.basicConfig(
        level=level,
        format=f"[%(asctime)s] [{component_name.upper()}] %(levelname)s %(name)s - %(message)s",
        datefmt=DATE_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    logger = logging.getLogger(component_name)
    logger.info(f"{component_name} logging initialized (level={logging.getLevelName(level)})")

    return logger
