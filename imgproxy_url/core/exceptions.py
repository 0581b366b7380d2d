"""
Error types raised while assembling and signing URLs
"""

from typing import Optional


class ImgproxyUrlError(Exception):
    """Base exception for URL assembly and signing errors"""

    def __init__(self, message: str, error_code: Optional[str] = None):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class InvalidEncodingError(ImgproxyUrlError, ValueError):
    """Raised when a hex-encoded key or salt is malformed"""

    def __init__(self, message: str, value: Optional[str] = None):
        super().__init__(message, "INVALID_ENCODING")
        self.value = value


class InvalidSignatureSizeError(ImgproxyUrlError, ValueError):
    """Raised when the requested signature size is outside 1..digest length"""

    def __init__(self, message: str, size: object = None):
        super().__init__(message, "INVALID_SIGNATURE_SIZE")
        self.size = size


class InvalidParameterError(ImgproxyUrlError, ValueError):
    """Raised by a transformer when modifier options violate its constraints
    Args:
        message (str): Error message
        modifier (Optional[str]): Modifier name (if available)
    Example:
        raise InvalidParameterError("angle must be a multiple of 90", modifier="rotate")
    """

    def __init__(self, message: str, modifier: Optional[str] = None):
        super().__init__(message, "INVALID_PARAMETER")
        self.modifier = modifier


class ConfigurationError(ImgproxyUrlError):
    """Exception raised when configuration is invalid"""

    def __init__(self, message: str, config_key: Optional[str] = None):
        super().__init__(message, "CONFIGURATION_ERROR")
        self.config_key = config_key
