import importlib
import inspect
import logging
from typing import Any, ClassVar, Dict, List, Mapping, Optional, Sequence, Tuple, Type

from creative_ioc.application.inspector import SignatureInspector
from creative_ioc.domain import (
    IContainer,
    Identifier,
    IInjector,
    InvalidArgumentError,
    MethodNotFoundError,
    NotInstantiableError,
    ParameterSpec,
    TargetKind,
    UnresolvedPrimitiveDependencyError,
)
from creative_ioc.domain.exceptions import describe

logger = logging.getLogger(__name__)

FACTORY_METHOD = "get_instance"


class Injector(IInjector):
    """Resolution engine that builds object graphs from constructor signatures.

    Every resolution constructs fresh instances. Primitive constructor
    parameters are filled from the binding registered under the identifier
    being resolved; class-typed parameters are resolved recursively.

    The dependency graph must be acyclic: a cycle recurses until the
    interpreter's recursion limit is hit.

    Attributes:
        _container: Registry consulted for bindings. Not owned by the injector.
        _inspector: Component describing signatures as parameter specs.
    """

    _instance: ClassVar[Optional["Injector"]] = None

    def __init__(self, container: IContainer, inspector: Optional[SignatureInspector] = None) -> None:
        """Initialize the injector with the registry it resolves against.

        Args:
            container: The registry holding service bindings.
            inspector: Optional signature inspector, mainly for tests.
        """
        self._container = container
        self._inspector = inspector or SignatureInspector()

    @property
    def container(self) -> IContainer:
        return self._container

    @classmethod
    def get_instance(cls, container: IContainer) -> "Injector":
        """Return the process-wide injector, creating it on first access.

        The first call binds the injector to ``container`` for the rest of the
        process. Later calls return the same injector and ignore their
        argument, so every call site has to agree on the registry. Prefer
        constructing ``Injector(container)`` explicitly.

        Args:
            container: Registry to bind to if no injector exists yet.

        Returns:
            The shared injector.
        """
        if Injector._instance is None:
            Injector._instance = cls(container)
        elif Injector._instance.container is not container:
            logger.warning(
                "Injector already bound to container %s; ignoring container %s",
                id(Injector._instance.container),
                id(container),
            )
        return Injector._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the process-wide injector so the next get_instance rebinds."""
        Injector._instance = None

    def invoke(
        self,
        target: Any,
        method_name: Optional[str] = None,
        args: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Resolve ``target`` and return the built instance or call result.

        Args:
            target: A class, a string identifier, a live object or a callable.
            method_name: Method to call on the resolved instance or live object.
            args: Explicit values for the method's primitive parameters.

        Returns:
            The constructed instance, or the return value of the call.

        Raises:
            InvalidArgumentError: If the target or arguments are malformed.
            NotInstantiableError: If a class in the graph cannot be constructed.
            UnresolvedPrimitiveDependencyError: If a primitive parameter has no value.
            MethodNotFoundError: If the requested method does not exist.

        Example:
            >>> container = Container()
            >>> container.set(Car, {"doors": 4})
            >>> car = Injector(container).invoke(Car)
            >>> Injector(container).invoke(logger, "log", {"message": "hi"})
        """
        kind = self._classify(target, method_name)
        explicit_args = self._validate_args(args)

        if kind == TargetKind.CALLABLE:
            return self.resolve_callable(target)

        if kind == TargetKind.CLASS:
            instance = self.resolve_class(target)
            if method_name is None:
                return instance
            return self.resolve_method(instance, method_name, explicit_args)

        return self.resolve_method(target, method_name, explicit_args)

    def resolve_class(self, identifier: Identifier) -> Any:
        """Build an instance of ``identifier`` with all dependencies injected.

        When a binding is registered under ``identifier`` its concrete service
        is instantiated and its args supply primitive parameters. Otherwise
        ``identifier`` itself is instantiated with no overrides.

        Args:
            identifier: A class or a string key / dotted import path.

        Returns:
            The constructed instance.

        Raises:
            NotInstantiableError: If the class is abstract without a factory,
                or a string identifier cannot be located.
            UnresolvedPrimitiveDependencyError: If a primitive parameter has no value.
        """
        binding = self._container.get(identifier)
        concrete = binding.specific_service if binding is not None else identifier
        overrides: Mapping[str, Any] = binding.args if binding is not None else {}
        service = self._locate(concrete)

        logger.debug("Resolving %s as %s", describe(identifier), service.__qualname__)

        if self._is_instantiable(service):
            positional, keyword = self._map_parameters(
                self._inspector.inspect_constructor(service), overrides, service
            )
            return service(*positional, **keyword)

        factory = getattr(service, FACTORY_METHOD, None)
        if factory is None or not callable(factory):
            raise NotInstantiableError(service, f"abstract type without a {FACTORY_METHOD}() factory")

        positional, keyword = self._map_parameters(self._inspector.inspect(factory), overrides, service)
        return factory(*positional, **keyword)

    def resolve_method(
        self,
        instance: Any,
        method_name: Optional[str],
        args: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Call ``method_name`` on ``instance`` with injected arguments.

        Primitive parameters read ``args`` instead of the registry.

        Args:
            instance: The object owning the method.
            method_name: Name of the method to call.
            args: Explicit values for primitive parameters, keyed by name.

        Returns:
            The method's return value.

        Raises:
            MethodNotFoundError: If ``method_name`` is empty or not a method of ``instance``.
            UnresolvedPrimitiveDependencyError: If a primitive parameter has no value.
        """
        if not method_name:
            raise MethodNotFoundError(instance, method_name)

        method = getattr(instance, method_name, None)
        if method is None or not callable(method):
            raise MethodNotFoundError(instance, method_name)

        logger.debug("Invoking %s.%s", describe(instance), method_name)
        positional, keyword = self._map_parameters(self._inspector.inspect(method), args or {}, instance)
        return method(*positional, **keyword)

    def resolve_callable(self, func: Any) -> Any:
        """Call ``func`` with its dependencies injected.

        A callable has no binding of its own, so only defaults and class-typed
        parameters can be filled.
        """
        logger.debug("Invoking callable %r", func)
        positional, keyword = self._map_parameters(self._inspector.inspect(func), {}, func)
        return func(*positional, **keyword)

    def _map_parameters(
        self,
        specs: Sequence[ParameterSpec],
        values: Mapping[str, Any],
        owner: Any,
    ) -> Tuple[List[Any], Dict[str, Any]]:
        """Produce call arguments for ``specs`` in declaration order.

        Each parameter takes, in order of precedence: its default when no value
        is supplied, a recursively resolved instance when it is class-typed,
        or the supplied value.
        """
        positional: List[Any] = []
        keyword: Dict[str, Any] = {}

        for spec in specs:
            supplied = values.get(spec.name)

            if spec.has_default and supplied is None:
                value = spec.default
            elif spec.is_dependency:
                value = self.resolve_class(spec.annotation)
            elif supplied is not None:
                value = supplied
            else:
                raise UnresolvedPrimitiveDependencyError(spec.name, owner)

            if spec.keyword_only:
                keyword[spec.name] = value
            else:
                positional.append(value)

        return positional, keyword

    @staticmethod
    def _classify(target: Any, method_name: Optional[str]) -> TargetKind:
        if target is None:
            raise InvalidArgumentError("target can't be None")

        if method_name is not None and (not isinstance(method_name, str) or not method_name.strip()):
            raise InvalidArgumentError("method_name must be a non-empty string when given")

        if isinstance(target, str):
            if not target.strip():
                raise InvalidArgumentError("target identifier can't be empty")
            return TargetKind.CLASS

        if inspect.isclass(target):
            return TargetKind.CLASS

        if method_name is not None:
            return TargetKind.OBJECT

        if callable(target):
            return TargetKind.CALLABLE

        raise InvalidArgumentError(
            f"method_name can't be empty when target is a {type(target).__name__} instance"
        )

    @staticmethod
    def _validate_args(args: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
        if args is None:
            return {}
        if not isinstance(args, Mapping):
            raise InvalidArgumentError(f"args must be a mapping, {type(args).__name__} given")
        return args

    @staticmethod
    def _is_instantiable(service: Type) -> bool:
        if inspect.isabstract(service):
            return False
        return not getattr(service, "_is_protocol", False)

    @staticmethod
    def _locate(identifier: Identifier) -> Type:
        """Return the class named by ``identifier``.

        Strings are treated as dotted import paths (``package.module.Class``).
        """
        if inspect.isclass(identifier):
            return identifier

        if not isinstance(identifier, str) or "." not in identifier:
            raise NotInstantiableError(identifier, "not a class, a registered key or a dotted import path")

        parts = identifier.split(".")
        # Longest importable module prefix wins, the rest is an attribute path.
        for split in range(len(parts) - 1, 0, -1):
            module_path = ".".join(parts[:split])
            attribute_path = parts[split:]
            try:
                target: Any = importlib.import_module(module_path)
            except ModuleNotFoundError as error:
                # only a missing prefix means "try a shorter module path"
                if error.name is not None and (module_path + ".").startswith(error.name + "."):
                    continue
                raise
            try:
                for attribute in attribute_path:
                    target = getattr(target, attribute)
            except AttributeError:
                break
            if inspect.isclass(target):
                return target
            break

        raise NotInstantiableError(identifier, "could not import a class from this path")
