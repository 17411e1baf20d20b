from .ansi import (
    Ansi,
    USER_LABEL,
    ASSISTANT_LABEL,
    ERROR_LABEL,
    INFO_LABEL,
    console,
)
from .display import Display
from .spinner import Spinner

__all__ = [
    "Ansi",
    "USER_LABEL",
    "ASSISTANT_LABEL",
    "ERROR_LABEL",
    "INFO_LABEL",
    "console",
    "Display",
    "Spinner",
]
