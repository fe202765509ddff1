"""Read endpoint verb and path of remote methods.

Remoting 3.x describes a method's routes as a list of endpoints
(``{"endpoints": [{"verb": "get", "fullPath": "/products/:id"}]}``);
remoting 2.x used flat ``httpMethod``/``fullPath`` fields. One implementation
per version is selected once per run.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .descriptors import MethodDescriptor
from .errors import UnsupportedEndpointPropertyError
from .loader import get_classes


class EndpointIntrospection(ABC):
    version: int

    @abstractmethod
    def property_of_first_endpoint(self, method: MethodDescriptor, item: str) -> Any:
        """Return ``item`` ("verb", "fullPath", ...) of the method's first endpoint."""


class EndpointsIntrospection(EndpointIntrospection):
    version = 3

    def property_of_first_endpoint(self, method: MethodDescriptor, item: str) -> Any:
        return method.endpoint["endpoints"][0][item]


class LegacyIntrospection(EndpointIntrospection):
    version = 2

    _FIELDS = {
        "verb": "httpMethod",
        "fullPath": "fullPath",
    }

    def property_of_first_endpoint(self, method: MethodDescriptor, item: str) -> Any:
        field_name = self._FIELDS.get(item)
        if field_name is None:
            raise UnsupportedEndpointPropertyError(item)
        return method.endpoint[field_name]


def _detect_version(registry: dict[str, Any]) -> int:
    for rest_class in get_classes(registry):
        for method in rest_class.get("methods", []):
            return 3 if "endpoints" in method else 2
    return 3


def select_introspection(registry: dict[str, Any]) -> EndpointIntrospection:
    """Pick the introspection matching the registry's remoting version."""
    version = registry.get("remotingVersion") or _detect_version(registry)
    if int(version) < 3:
        return LegacyIntrospection()
    return EndpointsIntrospection()
