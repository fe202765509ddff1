"""Descriptors handed from the collector to the template.

MethodDescriptor and Parameter are immutable: augmentation derives new records
with ``derive()`` and swaps them into the owning model's method list.
ModelDescriptor and ScopeDescriptor are built once per run and mutated in
place until rendering.
"""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence


@dataclass(frozen=True)
class Parameter:
    name: str
    type: Any = "any"
    source: str | None = None
    required: bool = False
    description: str | Sequence[str] | None = None


@dataclass(frozen=True)
class MethodDescriptor:
    name: str
    model: str
    is_static: bool = False
    accepts: tuple[Parameter, ...] = ()
    returns_array: bool = False
    description: str | Sequence[str] | None = None
    internal: str | bool = False
    deprecated: str | bool = False
    resource_params: tuple[Parameter, ...] = ()
    # raw introspection record; endpoint verb/path are read through
    # servicegen.introspection
    endpoint: Mapping[str, Any] = field(default_factory=dict, compare=False)

    @property
    def has_resource_params(self) -> bool:
        return bool(self.resource_params)

    def derive(self, **changes: Any) -> MethodDescriptor:
        """Return a copy with only the given fields changed."""
        return dataclasses.replace(self, **changes)


class ScopeState(enum.Enum):
    UNRESOLVED = "unresolved"
    RESOLVED = "resolved"
    SKIPPED = "skipped"


@dataclass
class ScopeDescriptor:
    target: str
    methods: dict[str, MethodDescriptor] = field(default_factory=dict)


@dataclass
class SchemaDescriptor:
    name: str
    properties: dict[str, dict[str, Any]] = field(default_factory=dict)


@dataclass
class ModelDescriptor:
    """A published model and everything the template needs to bind it."""

    name: str
    declared_name: str
    description: str | None = None
    methods: list[MethodDescriptor] = field(default_factory=list)
    ctor_accepts: tuple[Parameter, ...] | None = None
    relations: dict[str, str | None] = field(default_factory=dict)
    exposed_methods: frozenset[str] | None = None
    http_path: str = ""
    is_user: bool = False
    scopes: dict[str, ScopeDescriptor] = field(default_factory=dict)
    skipped_scopes: set[str] = field(default_factory=set)
    schema: SchemaDescriptor | None = None

    def scope_state(self, scope_name: str) -> ScopeState:
        if scope_name in self.skipped_scopes:
            return ScopeState.SKIPPED
        if scope_name in self.scopes:
            return ScopeState.RESOLVED
        return ScopeState.UNRESOLVED

    def exposes(self, method_name: str) -> bool:
        """Check the exposed-method filter; no filter exposes everything."""
        return self.exposed_methods is None or method_name in self.exposed_methods

    def find_methods(self, name: str) -> list[MethodDescriptor]:
        return [m for m in self.methods if m.name == name]
