from .logger import configure_logging, get_logger
from .timecode import InvalidTimecode, as_seconds, to_seconds
