from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from creative_ioc.domain.enums import ParameterKind

Identifier = Union[Type[Any], str]


class ServiceBinding(BaseModel):
    """Value object pairing a concrete service with its primitive overrides.

    Attributes:
        specific_service: The concrete class (or string identifier) to build.
        args: Values for non-class parameters, keyed by parameter name.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    specific_service: Identifier = Field(..., description="The concrete service this binding names.")
    args: Mapping[str, Any] = Field(
        default_factory=dict,
        validate_default=True,
        description="Overrides for primitive constructor parameters.",
    )

    @field_validator("specific_service")
    @classmethod
    def _not_empty(cls, value: Identifier) -> Identifier:
        if isinstance(value, str) and not value.strip():
            raise ValueError("specific_service can't be empty")
        return value

    @field_validator("args")
    @classmethod
    def _read_only(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    def get_specific_service(self) -> Identifier:
        return self.specific_service

    def get_args(self) -> Dict[str, Any]:
        return dict(self.args)

    def get_arg(self, name: str) -> Optional[Any]:
        """Return the override for ``name``, or None when absent."""
        return self.args.get(name)


# Name kept for callers familiar with the resolver terminology.
ServiceResolver = ServiceBinding


class ParameterSpec(BaseModel):
    """Static descriptor of one parameter the injector has to fill.

    Attributes:
        name: Parameter name as declared in the signature.
        kind: Whether the value is a primitive or a resolvable dependency.
        annotation: The declared (and resolved) type, if any.
        has_default: Whether the signature declares a default.
        default: The declared default, meaningful only if has_default.
        keyword_only: Whether the value must be passed by name.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    kind: ParameterKind
    annotation: Optional[Any] = None
    has_default: bool = False
    default: Any = None
    keyword_only: bool = False

    @property
    def is_dependency(self) -> bool:
        return self.kind == ParameterKind.DEPENDENCY
