
from .paths import PROJECT_ROOT, STORAGE_DIR, LOG_DIR, DEFAULT_LOG_FILE
from .logger import configure_logging, get_logger
from .settings import Settings, load_settings

__all__ = [
    "PROJECT_ROOT",
    "STORAGE_DIR",
    "LOG_DIR",
    "DEFAULT_LOG_FILE",
    "configure_logging",
    "get_logger",
    "Settings",
    "load_settings",
]
