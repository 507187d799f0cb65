"""Application layer - Signature introspection."""

import inspect
from inspect import Parameter
import types
from typing import Any, Callable, Dict, Iterable, Optional, Tuple, Type, Union, get_args, get_origin, get_type_hints

from creative_ioc.domain import ParameterKind, ParameterSpec

_POSITIONAL_KINDS = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
_SKIPPED_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)
_PRIMITIVE_MODULES = ("builtins", "typing", "typing_extensions")

_UNION_TYPES = (Union, types.UnionType)


def _unwrap_optional(annotation: Any) -> Any:
    """Return ``X`` for ``Optional[X]`` / ``X | None``, the annotation otherwise."""
    if get_origin(annotation) in _UNION_TYPES:
        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(members) == 1:
            return members[0]
    return annotation


def is_dependency_type(annotation: Any) -> bool:
    """Return whether ``annotation`` names a class the injector should build.

    Builtin types such as ``int``, ``str`` or ``dict`` and typing constructs
    are primitives.
    """
    annotation = _unwrap_optional(annotation)
    if not inspect.isclass(annotation) or get_origin(annotation) is not None:
        return False
    return annotation.__module__ not in _PRIMITIVE_MODULES


class SignatureInspector:
    """Turns live signatures into ``ParameterSpec`` descriptors.

    The injector walks these descriptors rather than ``inspect.Parameter``
    objects, so resolution logic never touches reflection directly.
    """

    def inspect_constructor(self, service: Type) -> Tuple[ParameterSpec, ...]:
        """Describe the parameters of ``service.__init__``.

        Args:
            service: The class being constructed.

        Returns:
            Descriptors in declaration order, the instance parameter excluded.
        """
        initializer = service.__init__
        parameters = list(inspect.signature(initializer).parameters.values())
        # unbound __init__: the first positional parameter is the instance
        if parameters and parameters[0].kind in _POSITIONAL_KINDS:
            parameters = parameters[1:]
        return self._describe(parameters, self._type_hints(initializer))

    def inspect(self, func: Callable) -> Tuple[ParameterSpec, ...]:
        """Describe the parameters of a function, method or callable object.

        Bound methods and classmethods are already stripped of their first
        parameter by ``inspect.signature``; nothing else is skipped by name.

        Args:
            func: The callable to describe.

        Returns:
            Descriptors in declaration order. Variadic parameters are skipped.
        """
        parameters = inspect.signature(func).parameters.values()
        return self._describe(parameters, self._type_hints(func))

    @staticmethod
    def _describe(parameters: Iterable[Parameter], type_hints: Dict[str, Any]) -> Tuple[ParameterSpec, ...]:
        specs = []
        for param in parameters:
            if param.kind in _SKIPPED_KINDS:
                continue

            annotation = type_hints.get(param.name, param.annotation)
            if annotation is inspect.Parameter.empty or isinstance(annotation, str):
                annotation = None

            has_default = param.default is not inspect.Parameter.empty
            specs.append(
                ParameterSpec(
                    name=param.name,
                    kind=ParameterKind.DEPENDENCY if is_dependency_type(annotation) else ParameterKind.PRIMITIVE,
                    annotation=_unwrap_optional(annotation),
                    has_default=has_default,
                    default=param.default if has_default else None,
                    keyword_only=param.kind == inspect.Parameter.KEYWORD_ONLY,
                )
            )
        return tuple(specs)

    @staticmethod
    def _type_hints(func: Callable) -> Dict[str, Any]:
        source: Optional[Any] = func
        if not inspect.isroutine(func) and not inspect.isclass(func):
            # callable instances keep their annotations on __call__
            source = getattr(func, "__call__", None)
        try:
            return get_type_hints(source)
        except (NameError, TypeError):
            # unresolvable forward references fall back to the raw annotations
            return {}
