from typing import Optional


class StudyAidError(Exception):
    """Base exception for study-aid errors."""

    def __init__(
        self, message: str, original_exception: Optional[Exception] = None
    ):
        super().__init__(message)
        self.original_exception = original_exception


class InvalidInputError(StudyAidError):
    """Raised when a flashcard is given an empty or blank field."""

    pass


class EmptyDeckError(StudyAidError):
    """Raised when an operation needs a card but the deck has none."""

    pass
