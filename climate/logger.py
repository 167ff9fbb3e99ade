"""
This file configures the logger for the climate summary tool.
"""

import logging
import sys


class ColoredFormatter(logging.Formatter):
    """
    Formatter that colors climate run messages by level.

    Skipped lines (WARNING) and unreadable files (ERROR) stand out from the
    per-file progress messages. Colors are only emitted when enabled, so
    redirected output stays plain text.
    """

    COLORS = {
        "DEBUG": "\033[0;96m",  # Cyan
        "INFO": "",
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[1;31m",  # Bold Red
    }
    RESET = "\033[0m"

    def __init__(self, fmt: str = None, use_color: bool = True):
        super().__init__(fmt)
        self.use_color = use_color

    def format(self, record):
        """
        Format the log record, wrapping it in its level color when enabled.

        Args:
            record: The log record to format.

        Returns:
            str: The formatted log message.
        """
        message = super().format(record)
        if not self.use_color:
            return message

        log_color = self.COLORS.get(record.levelname, self.RESET)
        return f"{log_color}{message}{self.RESET}"


def config_logger(debug: bool = False, use_color: bool = None) -> None:
    """
    Configures the root logger to write to stderr, keeping stdout for the report.

    Args:
        debug (bool, optional): If True, sets logging level to DEBUG;
                               otherwise sets it to INFO. Defaults to False.
        use_color (bool, optional): Force colors on or off. Defaults to
                                    coloring only when stderr is a terminal.
    """
    logger = logging.getLogger()

    # Remove any existing handlers to avoid duplication
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    stream = sys.stderr
    if use_color is None:
        use_color = hasattr(stream, "isatty") and stream.isatty()

    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        ColoredFormatter("[%(asctime)s] %(levelname)s: %(message)s", use_color)
    )

    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.addHandler(handler)
