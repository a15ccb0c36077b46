import os

from loguru import logger


def convert_to_bool(value: str) -> bool:
    if value.lower() in ("yes", "true", "t", "1"):
        return True
    elif value.lower() in ("no", "false", "f", "0"):
        return False
    else:
        raise ValueError(f"Boolean value expected, got {value!r}")


def debug_enabled() -> bool:
    if os.environ.get("PRIOHEAP_DEBUG"):
        try:
            return convert_to_bool(os.environ["PRIOHEAP_DEBUG"])
        except ValueError:
            logger.warning(f"Ignoring PRIOHEAP_DEBUG={os.environ['PRIOHEAP_DEBUG']!r}, debug checks stay off")
    return False


DEBUG = debug_enabled()
