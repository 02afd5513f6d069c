"""Custom exceptions for translation services."""


class TranslationFailure(Exception):
    """Base exception: the translation model could not produce a reply."""

    pass


class TranslationTimeoutError(TranslationFailure):
    """Raised when the model does not answer within the configured timeout."""

    pass


class TranslationRateLimitError(TranslationFailure):
    """Raised when rate limit is exceeded."""

    def __init__(self, message: str, retry_after: float = 60.0):
        super().__init__(message)
        self.retry_after = retry_after


class TranslationConnectionError(TranslationFailure):
    """Raised when unable to connect to the translation API."""

    pass


class TranslationAuthenticationError(TranslationFailure):
    """Raised when API key is invalid."""

    pass


class TranslationEmptyResponseError(TranslationFailure):
    """Raised when the model returns no text."""

    pass
