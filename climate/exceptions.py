"""
Exceptions for climate file processing.
"""


class ClimateError(Exception):
    """Base exception for climate processing errors."""

    pass


class MalformedRecord(ClimateError, ValueError):
    """A line that does not tokenize into a valid observation."""

    def __init__(self, reason: str, source: str = None, line_number: int = None):
        self.reason = reason
        self.source = source
        self.line_number = line_number
        super().__init__(str(self))

    def __str__(self):
        if self.source is None:
            return self.reason
        return f"{self.source}:{self.line_number}: {self.reason}"


class FileUnavailable(ClimateError, OSError):
    """An input path that cannot be opened for reading."""

    def __init__(self, path: str, reason: str = None):
        self.path = path
        self.reason = reason
        super().__init__(str(self))

    def __str__(self):
        if self.reason:
            return f"Cannot open {self.path}: {self.reason}"
        return f"Cannot open {self.path}"
