"""Exceptions raised by the service generator."""

from __future__ import annotations


class ServiceGenError(Exception):
    """Base class for all generator errors."""


class ConfigurationError(ServiceGenError):
    """Raised for invalid options, before any generation work starts."""


class UnsupportedEndpointPropertyError(ServiceGenError):
    """Raised when legacy introspection is asked for an unknown endpoint property."""

    def __init__(self, item: str) -> None:
        super().__init__(f"Unsupported endpoint property: {item}")
        self.item = item


class GenerationError(ServiceGenError):
    """Raised when rendering or transpiling the generated code fails."""
