from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from creative_ioc.domain.models import Identifier, ServiceBinding


class IContainer(ABC):
    """Abstract interface for the service binding registry."""

    @abstractmethod
    def set(
        self,
        specific_service: Identifier,
        args: Optional[Dict[str, Any]] = None,
        interface_service: Optional[Identifier] = None,
    ) -> None:
        """Register a binding under ``interface_service`` or ``specific_service``.

        Args:
            specific_service: The concrete service to build.
            args: Overrides for primitive parameters, keyed by name.
            interface_service: Optional lookup key the binding is stored under.
        """

    @abstractmethod
    def get(self, service_id: Identifier) -> Optional[ServiceBinding]:
        """Return the binding stored under ``service_id``, or None."""

    @abstractmethod
    def has(self, service_id: Identifier) -> bool:
        """Return whether ``service_id`` is a registered key."""


class IInjector(ABC):
    """Abstract interface for the resolution engine."""

    @abstractmethod
    def invoke(
        self,
        target: Any,
        method_name: Optional[str] = None,
        args: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Resolve ``target`` and return the built instance or call result.

        Args:
            target: A class, a string identifier, a live object or a callable.
            method_name: Method to call on the resolved instance or object.
            args: Explicit values for the method's primitive parameters.
        """
