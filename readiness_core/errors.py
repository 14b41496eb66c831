from __future__ import annotations


class InvalidAnswer(ValueError):
    """Raised when an answer names a question or option value the section does not offer."""


class StepError(RuntimeError):
    """Raised when a session operation does not apply to the current step."""


class BankError(ValueError):
    """Raised when the question bank file cannot be turned into questions."""
