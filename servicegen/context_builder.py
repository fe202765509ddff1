"""Build the Jinja2 template context for services.js.j2.

Collects the model descriptors and resolves the names of the common modules
(auth store, request interceptor, resource provider) shared by all models.
"""

from __future__ import annotations

import re
from typing import Any

from .collector import describe_models
from .config import GeneratorOptions

# Common modules are prefixed with this unless namespaced
_COMMON_PREFIX = "LoopBack"


def common_model_prefix(options: GeneratorOptions) -> str:
    """Prefix of the common module names."""
    if not options.namespace_common_models:
        return _COMMON_PREFIX
    prefix = options.module_name + options.namespace_delimiter
    return prefix.replace(".", options.namespace_delimiter)


def url_base(api_url: str) -> str:
    """Strip trailing slashes from the API URL."""
    return re.sub(r"/+$", "", api_url)


def build_context(registry: dict[str, Any], options: GeneratorOptions) -> dict[str, Any]:
    """Build the full template context from the registry document."""
    models = describe_models(registry, options)
    prefix = common_model_prefix(options)

    return {
        "module_name": options.module_name,
        "models": models,
        "common_auth": f"{prefix}Auth",
        "common_auth_request_interceptor": f"{prefix}AuthRequestInterceptor",
        "common_resource": f"{prefix}Resource",
        "common_resource_provider": f"{prefix}ResourceProvider",
        "url_base": url_base(options.api_url),
        "include_common_modules": options.include_common_modules,
        "comments": options.comments,
        "model_count": len(models),
    }
