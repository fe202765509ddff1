"""Shared fixtures for the servicegen test suite.

``shop_registry.json`` is a registry dump of a small shop application:
products with categories (hasMany), a supplier relation whose target is not
published, a relation without a target class, a User-derived customer whose
exposed-method filter hides one relation method, a model with two create
methods and a class that is not a model.
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import pytest

from servicegen.config import GeneratorOptions
from servicegen.loader import load_registry

FIXTURES_DIR = Path(__file__).parent / "fixtures"
SHOP_REGISTRY_PATH = FIXTURES_DIR / "shop_registry.json"


@pytest.fixture(scope="session")
def shop_registry_data() -> dict[str, Any]:
    return load_registry(SHOP_REGISTRY_PATH)


@pytest.fixture()
def shop_registry(shop_registry_data) -> dict[str, Any]:
    """A fresh copy of the shop registry for tests that edit it."""
    return copy.deepcopy(shop_registry_data)


@pytest.fixture()
def options() -> GeneratorOptions:
    return GeneratorOptions()


# ---------------------------------------------------------------------------
# In-memory registry builders
# ---------------------------------------------------------------------------

def path_arg(name: str) -> dict[str, Any]:
    return {"arg": name, "type": "any", "required": True, "http": {"source": "path"}}


def body_arg(name: str = "data") -> dict[str, Any]:
    return {"arg": name, "type": "object", "http": {"source": "body"}}


def make_method(
    name: str,
    *,
    is_static: bool | None = None,
    accepts: list[dict[str, Any]] | None = None,
    returns_array: bool = False,
    verb: str = "get",
    path: str = "/",
) -> dict[str, Any]:
    """Build a remoting 3.x method record."""
    if is_static is None:
        is_static = not name.startswith("prototype.")
    return {
        "name": name,
        "isStatic": is_static,
        "accepts": accepts or [],
        "returns": [{"arg": "data", "type": ["object"] if returns_array else "object", "root": True}],
        "endpoints": [{"verb": verb, "fullPath": path}],
    }


def make_class(
    name: str,
    methods: list[dict[str, Any]],
    *,
    relations: dict[str, Any] | None = None,
    ctor_accepts: list[dict[str, Any]] | None = None,
    ctor: bool = True,
) -> dict[str, Any]:
    rest_class: dict[str, Any] = {
        "name": name,
        "http": {"path": f"/{name}s"},
        "settings": {},
        "relations": relations or {},
        "methods": methods,
    }
    if ctor:
        rest_class["ctor"] = {"accepts": [path_arg("id")] if ctor_accepts is None else ctor_accepts}
    return rest_class


def make_registry(*classes: dict[str, Any], models: dict[str, Any] | None = None) -> dict[str, Any]:
    return {"remotingVersion": 3, "classes": list(classes), "models": models or {}}


@pytest.fixture()
def gadget_registry() -> dict[str, Any]:
    """Gadget hasMany widgets, with a get, create and delete relation method."""
    gadget = make_class(
        "gadget",
        [
            make_method("prototype.__get__widgets", returns_array=True, path="/gadgets/:id/widgets"),
            make_method(
                "prototype.__create__widgets", accepts=[body_arg()], verb="post",
                path="/gadgets/:id/widgets",
            ),
            make_method("prototype.__delete__widgets", verb="delete", path="/gadgets/:id/widgets"),
        ],
        relations={"widgets": {"targetClass": "widget"}},
    )
    widget = make_class("widget", [make_method("find", returns_array=True, path="/widgets")])
    return make_registry(gadget, widget)
