import logging
from typing import Any, Dict, Iterator, List, Mapping, Optional

from creative_ioc.domain import (
    DuplicateRegistrationError,
    IContainer,
    Identifier,
    InvalidArgumentError,
    ServiceBinding,
)

logger = logging.getLogger(__name__)


def _is_empty_identifier(identifier: Any) -> bool:
    if identifier is None:
        return True
    if isinstance(identifier, str):
        return not identifier.strip()
    return not isinstance(identifier, type)


class Container(IContainer):
    """Registry of service bindings.

    Maps a lookup key (an interface or, when none is given, the concrete
    service itself) to exactly one binding. Keys are write-once: there is no
    way to replace or delete a binding once registered.

    Attributes:
        _services: Dictionary mapping lookup keys to their bindings.
    """

    def __init__(self) -> None:
        """Initialize the container with an empty registry."""
        self._services: Dict[Identifier, ServiceBinding] = {}

    def set(
        self,
        specific_service: Identifier,
        args: Optional[Mapping[str, Any]] = None,
        interface_service: Optional[Identifier] = None,
    ) -> None:
        """Register a binding for ``specific_service``.

        Args:
            specific_service: The concrete class (or string identifier) to build.
            args: Values for the service's primitive constructor parameters.
            interface_service: Optional key to store the binding under. Defaults
                to ``specific_service``.

        Raises:
            InvalidArgumentError: If an identifier is empty or ``args`` is not a mapping.
            DuplicateRegistrationError: If the effective key is already registered.

        Example:
            >>> container = Container()
            >>> container.set(Car, {"doors": 4})
            >>> container.set(SqlUserRepository, {"dsn": "sqlite://"}, UserRepository)
        """
        if _is_empty_identifier(specific_service):
            raise InvalidArgumentError("specific_service can't be empty")

        if interface_service is not None and _is_empty_identifier(interface_service):
            raise InvalidArgumentError("interface_service can't be empty")

        if args is None:
            args = {}
        elif not isinstance(args, Mapping):
            raise InvalidArgumentError(f"args must be a mapping, {type(args).__name__} given")

        key = interface_service if interface_service is not None else specific_service
        if key in self._services:
            raise DuplicateRegistrationError(key)

        self._services[key] = ServiceBinding(specific_service=specific_service, args=dict(args))
        logger.debug("Registered %r -> %r with args %s", key, specific_service, sorted(args))

    def get(self, service_id: Identifier) -> Optional[ServiceBinding]:
        """Return the binding stored under ``service_id``, or None if unregistered."""
        return self._services.get(service_id)

    def has(self, service_id: Identifier) -> bool:
        """Return whether ``service_id`` is a registered key."""
        return service_id in self._services

    def keys(self) -> List[Identifier]:
        """Return the registered keys."""
        return list(self._services)

    def get_registry_copy(self) -> Dict[Identifier, ServiceBinding]:
        """Get a shallow copy of the registry.

        Bindings are immutable, so sharing them between copies is safe.

        Returns:
            Copy of the current key to binding mapping.
        """
        return self._services.copy()

    def __contains__(self, service_id: object) -> bool:
        return service_id in self._services

    def __len__(self) -> int:
        return len(self._services)

    def __iter__(self) -> Iterator[Identifier]:
        return iter(self._services)
