"""Naming conventions shared by the collector and the scope resolver.

Model names:
  product                      -> Product
  product (namespaced)         -> lbServices.Product

Relation methods generated by the data layer for a scope:
  prototype.__get__categories    -> op "get",    scope "categories"
  prototype.__create__categories -> op "create", scope "categories"

API names exposed on the model's scope accessor:
  get    -> categories
  delete -> categories.destroyAll
  other  -> categories.<op>

Reverse method names registered on the target model:
  Product.prototype.__get__categories -> Category."::get::product::categories"
"""

from __future__ import annotations

import re
from typing import Any, Sequence

from .config import GeneratorOptions

SCOPE_METHOD_PATTERN = re.compile(r"^prototype\.__([^_]+)__(.+)$")


def normalize_description(description: str | Sequence[str] | None) -> str | None:
    """Join a multi-line description given as a list of lines."""
    if isinstance(description, (list, tuple)):
        return "\n".join(description)
    return description


def capitalize(name: str) -> str:
    """Uppercase the first character only."""
    return name[:1].upper() + name[1:]


def format_model_name(name: str, options: GeneratorOptions) -> str:
    """Build the display name of a model as used in the generated module."""
    formatted = capitalize(name)
    if options.namespace_models:
        formatted = options.module_name + options.namespace_delimiter + formatted
    return formatted


def parse_scope_method(method_name: str) -> tuple[str, str] | None:
    """Split a relation method name into (op, scope name), or None."""
    match = SCOPE_METHOD_PATTERN.match(method_name)
    if not match:
        return None
    return match.group(1), match.group(2)


def bare_method_name(method_name: str) -> str:
    """Strip the instance prefix: prototype.__get__x -> __get__x."""
    return method_name.replace("prototype.", "", 1)


def scope_api_name(op: str, scope_name: str) -> str:
    """Name under which a relation operation is exposed on the scope accessor."""
    if op == "get":
        return scope_name
    if op == "delete":
        return f"{scope_name}.destroyAll"
    return f"{scope_name}.{op}"


def reverse_method_name(op: str, model_name: str, scope_name: str) -> str:
    """Name of the action registered on the target model for a relation."""
    return f"::{op}::{model_name.lower()}::{scope_name}"


def internal_note(model_name: str, api_name: str) -> str:
    """Redirect note attached to methods superseded by a scope accessor."""
    return f"Use {model_name}.{api_name}() instead."


def to_create_many(text: Any) -> Any:
    """Replace the first 'create' with 'createMany'; non-strings pass through."""
    if not isinstance(text, str):
        return text
    return text.replace("create", "createMany", 1)
