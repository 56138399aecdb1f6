"""Custom exceptions for the translation CLI."""


class TmtTranslateError(Exception):
    """Base class for translation CLI errors."""

    pass


class ConfigError(TmtTranslateError):
    """Required configuration is missing or malformed."""

    def __init__(self, message: str, variable: str | None = None) -> None:
        super().__init__(message)
        self.variable = variable


class TranslationProviderError(TmtTranslateError):
    """Raised when the translation API call fails irrecoverably."""

    pass


class SystemClockError(TmtTranslateError):
    """The system clock could not provide a usable Unix timestamp."""

    pass
