import logging
from typing import Final

RESET: Final[str] = "\033[0m"
LEVEL_STYLES: Final[dict[int, tuple[str, str]]] = {
    logging.WARNING: ("\033[33m", "Warn"),
    logging.ERROR: ("\033[31m", "Error"),
    logging.CRITICAL: ("\033[31m", "Error"),
}


class LogFormatter(logging.Formatter):
    """Plain messages, with warnings and errors coloured and prefixed."""

    def __init__(self, color: bool = True):
        super().__init__()
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        message = record.getMessage()
        style = LEVEL_STYLES.get(record.levelno)
        if style is None:
            return message

        color, label = style
        if not self.color:
            return f"{label}: {message}"
        return f"{color}{label}: {message}{RESET}"


def configure_logging(verbose: bool, color: bool = True):
    handler = logging.StreamHandler()
    handler.setFormatter(LogFormatter(color))

    logging.basicConfig(
        level=(logging.DEBUG if verbose else logging.INFO),
        handlers=[handler],
        force=True,
    )
