"""Exceptions raised while generating translation classes."""


class TranslationGenerationError(Exception):
    """Base class for every error raised by the generator."""


class InvalidTranslationFileName(TranslationGenerationError, ValueError):
    """Raised when a file name does not follow the translation file naming contract."""


class TranslationDiscoveryError(TranslationGenerationError):
    """Raised when the translation directory of an interface cannot be listed."""


class PropertiesLoadError(TranslationGenerationError):
    """Raised when a translation file cannot be read."""


class PropertiesSyntaxError(PropertiesLoadError):
    """Raised when a translation file is not valid properties syntax."""

    def __init__(self, file_path: str, line_number: int, reason: str):
        self.file_path = file_path
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"{file_path}:{line_number}: {reason}")


class EmissionError(TranslationGenerationError):
    """Raised by an emitter when a class cannot be written."""


class InterfaceDescriptorError(TranslationGenerationError):
    """Raised when the message interface descriptor is invalid."""
