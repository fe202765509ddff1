"""Reverse-engineer relation scopes from prototype method names.

The data layer exposes every relation ("scope") of a model through prototype
methods named ``prototype.__<op>__<scope>``. For each of them this module:

- resolves the relation's target model,
- records a ScopeDescriptor on the source model (the first match for a
  relation decides whether it is exposed at all),
- appends a reverse action to the target model so its $resource can call the
  source model's endpoint, e.g. Product.__get__categories becomes
  Category."::get::product::categories",
- stores the action under its API name (``categories``,
  ``categories.create``, ``categories.destroyAll``...) in the scope.
"""

from __future__ import annotations

import logging

from .config import GeneratorOptions
from .descriptors import ModelDescriptor, ScopeDescriptor, ScopeState
from .naming import (
    bare_method_name,
    format_model_name,
    internal_note,
    parse_scope_method,
    reverse_method_name,
    scope_api_name,
    to_create_many,
)

logger = logging.getLogger(__name__)


def find_model_by_name(
    models: dict[str, ModelDescriptor], name: str,
) -> ModelDescriptor | None:
    """Case-insensitive lookup of a model by formatted name."""
    wanted = name.lower()
    for model_name, model in models.items():
        if model_name.lower() == wanted:
            return model
    return None


def _open_scope(
    models: dict[str, ModelDescriptor],
    model: ModelDescriptor,
    method_name: str,
    scope_name: str,
    options: GeneratorOptions,
) -> None:
    """Resolve a relation seen for the first time.

    Leaves the scope unresolved when it cannot be decided yet, marks it
    skipped when the target is not published.
    """
    target_class = model.relations.get(scope_name)
    if not target_class:
        return

    target_name = format_model_name(target_class, options)
    if find_model_by_name(models, target_name) is None:
        logger.info(
            "Skipping relation %s.%s: target model %s is not published",
            model.name, scope_name, target_name,
        )
        model.skipped_scopes.add(scope_name)
        return

    if not model.exposes(bare_method_name(method_name)):
        logger.debug("Skipping %s.%s: method is not exposed", model.name, method_name)
        return

    model.scopes[scope_name] = ScopeDescriptor(target=target_name)


def build_scope_method(
    models: dict[str, ModelDescriptor],
    model: ModelDescriptor,
    index: int,
    options: GeneratorOptions,
) -> None:
    """Process the method at ``model.methods[index]``."""
    method = model.methods[index]
    parsed = parse_scope_method(method.name)
    if parsed is None:
        return
    op, scope_name = parsed

    if model.scope_state(scope_name) is ScopeState.UNRESOLVED:
        _open_scope(models, model, method.name, scope_name, options)
    if model.scope_state(scope_name) is not ScopeState.RESOLVED:
        return

    scope = model.scopes[scope_name]
    target = find_model_by_name(models, scope.target)
    if target is None:
        return

    api_name = scope_api_name(op, scope_name)
    note = internal_note(model.name, api_name)
    method = method.derive(internal=note)
    model.methods[index] = method

    reverse_name = reverse_method_name(op, model.declared_name, scope_name)

    reverse_method = method.derive(name=reverse_name, internal=note, deprecated=False)
    target.methods.append(reverse_method)
    if "create" in reverse_method.name:
        target.methods.append(reverse_method.derive(
            name=to_create_many(reverse_method.name),
            internal=to_create_many(reverse_method.internal),
            returns_array=True,
        ))

    scope_method = method.derive(name=reverse_name, internal=False, deprecated=False)
    scope.methods[api_name] = scope_method
    if "create" in scope_method.name:
        scope.methods[to_create_many(api_name)] = scope_method.derive(
            name=to_create_many(scope_method.name),
            returns_array=True,
        )


def build_scopes_of_model(
    models: dict[str, ModelDescriptor],
    model: ModelDescriptor,
    options: GeneratorOptions,
) -> ModelDescriptor:
    model.scopes = {}
    model.skipped_scopes = set()
    # reverse methods appended during the walk are not revisited
    for index in range(len(model.methods)):
        build_scope_method(models, model, index, options)
    return model


def build_scopes(models: dict[str, ModelDescriptor], options: GeneratorOptions) -> None:
    """Resolve scopes of every model, in collection order."""
    for model in models.values():
        build_scopes_of_model(models, model, options)
