import logging
import os
import time

from nugget.config import Config
from nugget.utils.logger import get_logger

logger: logging.Logger = get_logger(__name__)


def tmp_path(file_name: str = "") -> str:
    """
    Returns a path inside the temporary folder, creating the folder if needed.

    Arguments:
        file_name (str): File name to place in the temporary folder.

    Returns:
        str: Absolute path of the file (or of the folder itself).
    """
    folder: str = os.path.abspath(Config.TMP_FOLDER)
    os.makedirs(folder, exist_ok=True)
    return os.path.join(folder, file_name) if file_name else folder


def unique_name(suffix: str) -> str:
    """Returns a millisecond timestamp based file name."""
    return f"{time.time_ns() // 1_000_000}{suffix}"


def discard(path: str | None) -> None:
    """Removes a temporary file; failures are logged and never raised."""
    if not path:
        return
    try:
        os.remove(path)
        logger.debug(msg=f"Removed temporary file {path}")
    except FileNotFoundError:
        pass
    except OSError as err:
        logger.warning(msg=f"Could not remove temporary file {path}: {err}")
