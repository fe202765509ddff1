"""Augment the method list of a collected model.

Handles:
- createMany variants of a single create method
- Constructor path parameters (":id") on prototype methods
- Resource parameters (path params other than id)
- Description normalization
"""

from __future__ import annotations

from .descriptors import MethodDescriptor, ModelDescriptor, Parameter
from .naming import normalize_description

# Implicit identifier bound by the resource's default params
_ID_PARAM = "id"


def add_create_many(model: ModelDescriptor) -> None:
    """Append an array-returning createMany clone of a lone create method."""
    creates = model.find_methods("create")
    if len(creates) != 1:
        return
    model.methods.append(creates[0].derive(name="createMany", returns_array=True))


def _find_resource_params(accepts: tuple[Parameter, ...]) -> tuple[Parameter, ...]:
    return tuple(
        arg for arg in accepts
        if arg.source == "path" and arg.name != _ID_PARAM
    )


def _augment_method(model: ModelDescriptor, method: MethodDescriptor) -> MethodDescriptor:
    accepts = method.accepts
    # $resource actions are all static, so prototype methods take the ctor
    # arguments of their URL first
    if model.ctor_accepts is not None and not method.is_static:
        accepts = model.ctor_accepts + accepts

    return method.derive(
        accepts=accepts,
        resource_params=_find_resource_params(accepts),
        description=normalize_description(method.description),
    )


def augment_methods(model: ModelDescriptor) -> None:
    """Run every augmentation pass over ``model.methods`` in place."""
    add_create_many(model)
    model.methods[:] = [_augment_method(model, m) for m in model.methods]
