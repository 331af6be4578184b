"""Exceções compartilhadas do relay."""

from .exceptions import (
    BadRequestError,
    ConfigurationError,
    DeliveryError,
    EncodingError,
    HeaderEncodingError,
    HeaderValueError,
    MalformedHeaderError,
    MissingHeaderValueError,
    QueueClosedError,
    RelayError,
    UnsupportedMediaTypeError,
    ValidationError,
)

__all__ = [
    "BadRequestError",
    "ConfigurationError",
    "DeliveryError",
    "EncodingError",
    "HeaderEncodingError",
    "HeaderValueError",
    "MalformedHeaderError",
    "MissingHeaderValueError",
    "QueueClosedError",
    "RelayError",
    "UnsupportedMediaTypeError",
    "ValidationError",
]
