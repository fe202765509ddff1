"""Generator options.

Defaults mirror the ones the AngularJS SDK has always shipped with. Options can
be passed as a GeneratorOptions, as a mapping (camelCase or snake_case keys),
or through the legacy positional form (module name, api url).
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    model_validator,
)

from .errors import ConfigurationError


class GeneratorOptions(BaseModel):
    """Options for one generation run."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="forbid",
        validate_assignment=True,
    )

    module_name: str = Field(
        default="lbServices",
        validation_alias=AliasChoices("module_name", "moduleName", "ngModuleName"),
    )
    api_url: str = Field(default="/", alias="apiUrl")
    include_common_modules: bool = Field(default=True, alias="includeCommonModules")
    namespace_models: bool = Field(default=False, alias="namespaceModels")
    namespace_common_models: bool = Field(default=False, alias="namespaceCommonModels")
    namespace_delimiter: str = Field(default=".", alias="namespaceDelimiter")
    models_to_ignore: list[str] = Field(default_factory=list, alias="modelsToIgnore")
    comments: bool = False
    include_schema: bool = Field(default=False, alias="includeSchema")

    @model_validator(mode="after")
    def check_common_model_delimiter(self) -> GeneratorOptions:
        if self.namespace_common_models and self.namespace_delimiter == ".":
            raise ValueError("Unsupported delimiter '.' for namespacing common models.")
        return self

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> GeneratorOptions:
        """Build options from a mapping, ignoring None values."""
        present = {key: value for key, value in values.items() if value is not None}
        try:
            return cls.model_validate(present)
        except ValidationError as exc:
            raise ConfigurationError(_describe_errors(exc)) from exc


def _describe_errors(exc: ValidationError) -> str:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        if error["type"] == "extra_forbidden":
            messages.append(f"Unknown option: {location}")
        elif error["type"] == "value_error" and not location:
            messages.append(str(error["ctx"]["error"]))
        else:
            messages.append(f"{location}: {error['msg']}")
    return "; ".join(messages)


def resolve_options(
    options: GeneratorOptions | Mapping[str, Any] | str | None = None,
    api_url: str | None = None,
) -> GeneratorOptions:
    """Normalize any supported call form into validated GeneratorOptions.

    A string in place of ``options`` is the legacy form
    ``(module_name, api_url)``. GeneratorOptions instances are validated when
    built, so they are returned as they are.
    """
    if isinstance(options, GeneratorOptions):
        return options
    if isinstance(options, str):
        return GeneratorOptions.from_mapping({"module_name": options, "api_url": api_url})
    if options is None:
        return GeneratorOptions()
    return GeneratorOptions.from_mapping(options)
