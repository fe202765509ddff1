"""Collect model descriptors from a registry document.

Formats model names, drops ignored classes and classes that are not models,
converts remote methods into MethodDescriptors, then runs the augmenter,
the scope resolver and (optionally) the schema builder over the full set.
"""

from __future__ import annotations

import logging
from typing import Any

from .augmenter import augment_methods
from .config import GeneratorOptions
from .descriptors import MethodDescriptor, ModelDescriptor, Parameter
from .loader import get_base_chain, get_classes, get_model_definition, get_user_model
from .naming import format_model_name, normalize_description
from .schema_builder import build_schemas
from .scopes import build_scopes

logger = logging.getLogger(__name__)


def _parse_parameter(arg: dict[str, Any]) -> Parameter:
    http = arg.get("http")
    source = http.get("source") if isinstance(http, dict) else None
    return Parameter(
        name=arg["arg"],
        type=arg.get("type", "any"),
        source=source,
        required=bool(arg.get("required", False)),
        description=arg.get("description"),
    )


def _parse_parameters(accepts: list[dict[str, Any]] | None) -> tuple[Parameter, ...]:
    return tuple(_parse_parameter(arg) for arg in accepts or [])


def _is_returning_array(returns: list[dict[str, Any]] | dict[str, Any] | None) -> bool:
    """A method returns an array when its single root return is array-typed."""
    if isinstance(returns, dict):
        returns = [returns]
    if not returns or len(returns) != 1:
        return False
    ret = returns[0]
    if not ret.get("root"):
        return False
    ret_type = ret.get("type")
    return isinstance(ret_type, list) or ret_type == "array"


def describe_method(raw: dict[str, Any], model_name: str) -> MethodDescriptor:
    """Convert a raw remote method into a MethodDescriptor."""
    return MethodDescriptor(
        name=raw["name"],
        model=model_name,
        is_static=bool(raw.get("isStatic", False)),
        accepts=_parse_parameters(raw.get("accepts")),
        returns_array=_is_returning_array(raw.get("returns")),
        description=raw.get("description"),
        internal=raw.get("internal") or False,
        deprecated=raw.get("deprecated") or False,
        endpoint=raw,
    )


def _is_user_model(registry: dict[str, Any], declared_name: str) -> bool:
    user_model = get_user_model(registry)
    return declared_name == user_model or user_model in get_base_chain(registry, declared_name)


def _relation_targets(rest_class: dict[str, Any]) -> dict[str, str | None]:
    """Map each relation accessor to its target class name, if it has one."""
    targets: dict[str, str | None] = {}
    for scope_name, relation in rest_class.get("relations", {}).items():
        if isinstance(relation, dict):
            targets[scope_name] = relation.get("targetClass")
        else:
            targets[scope_name] = relation
    return targets


def describe_model(
    registry: dict[str, Any],
    rest_class: dict[str, Any],
    options: GeneratorOptions,
) -> ModelDescriptor | None:
    """Build the descriptor of one REST class, or None when it is skipped."""
    declared_name = rest_class["name"]
    name = format_model_name(declared_name, options)

    if name in options.models_to_ignore:
        logger.warning("Skipping %s model as it is not to be published", name)
        return None

    ctor = rest_class.get("ctor")
    if not ctor:
        logger.error("Skipping %s as it is not a LoopBack model", name)
        return None

    settings = rest_class.get("settings", {})
    definition = get_model_definition(registry, declared_name)
    exposed = definition.get("swaggerMethods")
    ctor_accepts = ctor.get("accepts")

    model = ModelDescriptor(
        name=name,
        declared_name=declared_name,
        description=normalize_description(settings.get("description")),
        methods=[describe_method(raw, name) for raw in rest_class.get("methods", [])],
        ctor_accepts=_parse_parameters(ctor_accepts) if ctor_accepts is not None else None,
        relations=_relation_targets(rest_class),
        exposed_methods=frozenset(exposed) if exposed is not None else None,
        http_path=rest_class.get("http", {}).get("path", f"/{declared_name}"),
        is_user=_is_user_model(registry, declared_name),
    )
    return model


def describe_models(
    registry: dict[str, Any],
    options: GeneratorOptions,
) -> dict[str, ModelDescriptor]:
    """Build all model descriptors keyed by formatted name."""
    result: dict[str, ModelDescriptor] = {}

    for rest_class in get_classes(registry):
        model = describe_model(registry, rest_class, options)
        if model is not None:
            result[model.name] = model

    logger.debug("Collected %d models", len(result))

    for model in result.values():
        augment_methods(model)

    # scopes look up other models, so they need the complete set
    build_scopes(result, options)

    if options.include_schema:
        build_schemas(result, registry)

    return result
