"""Snapshot model property definitions for the generated `schema` attribute.

Property types that reference another model are replaced by that model's
name. In-memory registries hold the class itself; a JSON registry cannot, so
it writes the reference as an object naming the model::

    "address": {"type": {"modelName": "address"}}

List-typed properties such as ``[Address]`` are copied as they are.
"""

from __future__ import annotations

from typing import Any

from .descriptors import ModelDescriptor, SchemaDescriptor
from .loader import get_model_definition


def normalize_type(prop_type: Any) -> Any:
    """Convert a class type reference into its declared name."""
    if isinstance(prop_type, type):
        return getattr(prop_type, "model_name", None) or prop_type.__name__
    if isinstance(prop_type, dict) and "modelName" in prop_type:
        return prop_type["modelName"]
    return prop_type


def build_schema(model: ModelDescriptor, registry: dict[str, Any]) -> SchemaDescriptor:
    definition = get_model_definition(registry, model.declared_name)
    properties: dict[str, dict[str, Any]] = {}
    for prop_name, prop in definition.get("properties", {}).items():
        # shorthand definitions: {"name": "string"}
        schema = dict(prop) if isinstance(prop, dict) else {"type": prop}
        schema["type"] = normalize_type(schema.get("type"))
        properties[prop_name] = schema
    return SchemaDescriptor(name=model.name, properties=properties)


def build_schemas(models: dict[str, ModelDescriptor], registry: dict[str, Any]) -> None:
    """Attach a SchemaDescriptor to every collected model."""
    for model in models.values():
        model.schema = build_schema(model, registry)
