"""Exceptions raised by the rename pipeline."""


class AsciiRenameError(Exception):
    """Base class for ascii-rename errors."""


class TransliterationError(AsciiRenameError):
    """Raised when a name cannot be converted to a usable ASCII name."""

    def __init__(self, value: str, reason: str) -> None:
        super().__init__(f"Unable to convert '{value}' to ASCII: {reason}")
        self.value = value
        self.reason = reason
