"""Custom exceptions for locale-aware text operations.

This module defines the error taxonomy shared by every loctext component.
All errors are raised synchronously at the offending operation; nothing is
defaulted or retried inside the library.
"""


class LocTextError(Exception):
    """Base exception for loctext errors."""

    def __init__(self, message: str) -> None:
        """Initialize loctext error.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(message)


class MalformedTextError(LocTextError):
    """Raised when input is not a well-formed Unicode codepoint sequence.

    This covers non-str input, lone surrogates, and bytes that cannot be
    decoded with the requested encoding. No partial result is ever returned.
    """

    def __init__(self, message: str, index: int | None = None) -> None:
        """Initialize malformed text error.

        Args:
            message: Human-readable error description.
            index: Offset of the first offending codepoint or byte, if known.
        """
        self.index = index
        if index is not None:
            message = f"{message} (at index {index})"
        super().__init__(message)


class UnknownLocaleError(LocTextError):
    """Raised when a locale identifier does not resolve to a rule table.

    Callers that want a fallback must catch this and retry with a known
    locale; the library never substitutes the root locale on its own.
    """

    def __init__(self, identifier: object, reason: str | None = None) -> None:
        """Initialize unknown locale error.

        Args:
            identifier: The identifier that failed to resolve.
            reason: Optional detail on why resolution failed.
        """
        self.identifier = identifier
        message = f"Unknown locale: {identifier!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class UnsupportedOperationError(LocTextError):
    """Raised when a locale's rule table does not define an operation.

    For example, title casing is undefined for scripts without case.
    """

    def __init__(self, operation: str, locale: str) -> None:
        """Initialize unsupported operation error.

        Args:
            operation: Name of the requested operation.
            locale: Tag of the locale that lacks the rule.
        """
        self.operation = operation
        self.locale = locale
        super().__init__(
            f"Operation '{operation}' is not supported for locale '{locale}'"
        )


class RuleTableError(LocTextError):
    """Raised when a shipped locale rule table fails to load or validate."""

    def __init__(self, message: str, language: str | None = None) -> None:
        """Initialize rule table error.

        Args:
            message: Human-readable error description.
            language: Language code of the table that failed.
        """
        self.language = language
        super().__init__(message)
