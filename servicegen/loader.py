"""Load and query a model registry document.

A registry document is a JSON dump of a REST application's model registry:

    {
      "remotingVersion": 3,
      "userModel": "User",
      "classes": [{"name": ..., "ctor": {...}, "methods": [...], ...}],
      "models": {"product": {"base": ..., "properties": {...}}}
    }

"classes" are the REST adapter classes in declaration order, "models" the
model definitions keyed by declared name.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

DEFAULT_USER_MODEL = "User"


def load_registry(path: Path | str) -> dict[str, Any]:
    """Load a registry document from disk."""
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def get_classes(registry: dict[str, Any]) -> list[dict[str, Any]]:
    """Extract the REST adapter classes from the registry."""
    return registry.get("classes", [])


def get_model_definition(registry: dict[str, Any], name: str) -> dict[str, Any]:
    """Return the raw definition of a model by its declared name."""
    return registry.get("models", {}).get(name, {})


def get_user_model(registry: dict[str, Any]) -> str:
    """Name of the built-in user type."""
    return registry.get("userModel", DEFAULT_USER_MODEL)


def get_base_chain(registry: dict[str, Any], name: str) -> list[str]:
    """Walk the base model links of ``name``, nearest base first."""
    chain: list[str] = []
    seen = {name}
    base = get_model_definition(registry, name).get("base")
    while base and base not in seen:
        chain.append(base)
        seen.add(base)
        base = get_model_definition(registry, base).get("base")
    return chain
