from typing import Optional


class FlashQuizError(Exception):
    """Base exception for flashquiz errors."""

    def __init__(
        self, message: str, original_exception: Optional[Exception] = None
    ):
        super().__init__(message)
        self.original_exception = original_exception


class CardFileNotFoundError(FlashQuizError):
    """Raised when an import path does not name an existing file."""

    def __init__(self, path):
        super().__init__(f"Card file not found: {path}")
        self.path = path


class MalformedCardFileError(FlashQuizError):
    """Raised when a card file record cannot be decoded."""

    def __init__(
        self,
        path,
        line_number: Optional[int],
        reason: str,
        original_exception: Optional[Exception] = None,
    ):
        location = f" at line {line_number}" if line_number else ""
        super().__init__(
            f"Malformed card file {path}{location}: {reason}",
            original_exception,
        )
        self.path = path
        self.line_number = line_number
        self.reason = reason


class CardFileWriteError(FlashQuizError):
    """Raised for errors writing a card file or a transcript."""

    pass


class InvalidCountError(FlashQuizError):
    """Raised when the number of quiz rounds is not an integer."""

    pass


class EmptyStoreError(FlashQuizError):
    """Raised when a card is drawn from an empty store."""

    pass
