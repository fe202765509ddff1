"""Render the services template and downlevel the result.

Takes the context from context_builder and produces the AngularJS module
source as a string.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping

import dukpy
import jinja2

from .config import GeneratorOptions, resolve_options
from .context_builder import build_context
from .descriptors import MethodDescriptor, ModelDescriptor
from .errors import GenerationError, UnsupportedEndpointPropertyError
from .introspection import EndpointIntrospection, select_introspection

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "services.js.j2"


def _unserializable(obj: Any) -> None:
    # class references left in list-typed properties serialize as null
    return None


def quoted_string(obj: Any) -> str:
    """Serialize ``obj`` as a JavaScript literal."""
    return json.dumps(obj, indent=2, default=_unserializable)


def model_doc_lines(model: ModelDescriptor, module_name: str) -> list[str]:
    """ngdoc comment lines of a model factory."""
    qualified = f"{module_name}.{model.name}"
    lines = ["@ngdoc object", f"@name {qualified}", f"@header {qualified}", "@object", "@description", ""]
    if model.description:
        lines.extend(model.description.split("\n"))
    else:
        lines.append(f"A $resource object for interacting with the `{model.name}` model.")
    return lines


def method_doc_lines(method: MethodDescriptor) -> list[str]:
    """ngdoc comment lines of a resource action."""
    lines: list[str] = []
    if method.internal:
        lines.append(f"@deprecated {method.internal}")
    elif method.deprecated:
        lines.append(f"@deprecated {method.deprecated}")
    if isinstance(method.description, str):
        lines.extend(method.description.split("\n"))
    for arg in method.accepts:
        line = f"@param {{{arg.type}}} {arg.name}"
        if isinstance(arg.description, str):
            line += f" {arg.description}"
        lines.append(line)
    if method.returns_array:
        lines.append("@returns {Array.<Object>}")
    return lines


def _environment() -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )


def render_services(
    context: dict[str, Any],
    introspection: EndpointIntrospection,
) -> str:
    """Render the services template with the endpoint and quoting helpers."""
    template = _environment().get_template(TEMPLATE_NAME)
    module_name = context["module_name"]
    return template.render(
        **context,
        endpoint=introspection.property_of_first_endpoint,
        quoted=quoted_string,
        model_doc=lambda model: model_doc_lines(model, module_name),
        method_doc=method_doc_lines,
    )


def transpile(source: str) -> str:
    """Downlevel generated JavaScript to ES5 with Babel."""
    return dukpy.babel_compile(source, presets=["es2015"])["code"]


def generate_services(
    registry: dict[str, Any],
    options: GeneratorOptions | Mapping[str, Any] | str | None = None,
    api_url: str | None = None,
) -> str:
    """Generate the AngularJS services module for a registry document.

    ``generate_services(registry, "lbServices", "/api")`` is accepted for
    compatibility with the positional call form.
    """
    resolved = resolve_options(options, api_url)
    introspection = select_introspection(registry)
    context = build_context(registry, resolved)

    try:
        source = render_services(context, introspection)
    except UnsupportedEndpointPropertyError:
        raise
    except Exception as exc:
        logger.exception("Failed to render %s", TEMPLATE_NAME)
        raise GenerationError(str(exc)) from exc

    try:
        code = transpile(source)
    except Exception as exc:
        logger.exception("Failed to transpile generated services")
        raise GenerationError(str(exc)) from exc

    logger.debug("Generated %s (%d models)", resolved.module_name, context["model_count"])
    return code


def write_services(code: str, output_path: Path) -> None:
    """Write generated code, creating the parent directory if needed."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(code, encoding="utf-8")
