"""Custom exceptions for the facts use cases."""


class FactsError(Exception):
    """Base class for every failure a facts use case reports."""

    pass


class InvalidInputError(FactsError, ValueError):
    """Base class for client input errors."""

    pass


class InvalidTextError(InvalidInputError):
    """Raised when text is missing, empty or too long."""

    def __init__(self):
        super().__init__("Invalid text parameter")


class InvalidContextError(InvalidInputError):
    """Raised when context is missing, empty or too long."""

    def __init__(self):
        super().__init__("Invalid context parameter")


class FactsNotFoundError(FactsError):
    """Raised when no facts match the requested context."""

    def __init__(self):
        super().__init__(
            "No facts were found matching the specified text and context."
        )


class UpstreamError(FactsError):
    """Base class for failures of the completion service or the row store."""

    pass


class GenerationError(UpstreamError):
    """Raised when extracting or storing facts for a new text fails."""

    pass


class FactsLookupError(UpstreamError):
    """Raised when the row store cannot be queried for facts."""

    pass
