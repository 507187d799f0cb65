import inspect
from typing import Any, Optional


def describe(service: Any) -> str:
    """Return a readable name for a class, string identifier, function or instance."""
    if isinstance(service, str):
        return service
    if isinstance(service, type) or inspect.isroutine(service):
        return getattr(service, "__qualname__", repr(service))
    return type(service).__qualname__


class IoCException(Exception):
    """Base exception for IoC-related errors."""


class InvalidArgumentError(IoCException, ValueError):
    """Raised for malformed calls.

    This occurs when:
    - An empty identifier is registered or invoked.
    - The invoke target is of an unsupported kind.
    - A live object is invoked without a method name.
    """


class DuplicateRegistrationError(IoCException):
    """Raised when a key already holds a binding.

    Attributes:
        key: The registry key that was registered twice.
    """

    def __init__(self, key: Any) -> None:
        self.key = key
        super().__init__(f"Service {describe(key)} is already registered")


class NotInstantiableError(IoCException):
    """Raised when a service cannot be constructed.

    This occurs when:
    - The class is abstract or a protocol and has no get_instance factory.
    - A string identifier cannot be located.

    Attributes:
        service: The identifier that could not be instantiated.
        reason: Optional reason for the failure.
    """

    def __init__(self, service: Any, reason: Optional[str] = None) -> None:
        self.service = service
        self.reason = reason
        message = f"Cannot instantiate service: {describe(service)}"
        if reason:
            message += f". Reason: {reason}"
        super().__init__(message)


class UnresolvedPrimitiveDependencyError(IoCException):
    """Raised when a primitive parameter has neither a default nor an override.

    Attributes:
        parameter: Name of the unresolved parameter.
        service: The class, instance or callable owning the parameter.
    """

    def __init__(self, parameter: str, service: Any) -> None:
        self.parameter = parameter
        self.service = service
        super().__init__(
            f"Cannot resolve primitive dependency: argument '{parameter}' "
            f"has no value for {describe(service)}"
        )


class MethodNotFoundError(IoCException):
    """Raised when the requested method is missing on the instance.

    Attributes:
        service: The instance the method was looked up on.
        method_name: The requested method name.
    """

    def __init__(self, service: Any, method_name: Optional[str]) -> None:
        self.service = service
        self.method_name = method_name
        if not method_name:
            message = "Method name can't be empty"
        else:
            message = f"Service {describe(service)} has no method '{method_name}'"
        super().__init__(message)
