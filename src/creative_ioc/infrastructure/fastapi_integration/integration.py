from typing import Any, Awaitable, Callable, Mapping, Optional

from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from creative_ioc.domain import IInjector


def create_fastapi_dependency(
    injector: IInjector,
    target: Any,
    method_name: Optional[str] = None,
    args: Optional[Mapping[str, Any]] = None,
) -> Callable[[], Any]:
    """Create a FastAPI Depends() callable that invokes the injector.

    Every call builds a fresh object graph, since the injector does not
    cache instances.

    Args:
        injector: The injector to resolve through.
        target: A class, string identifier, live object or callable.
        method_name: Optional method to call on the resolved target.
        args: Explicit values for the method's primitive parameters.

    Returns:
        A callable that FastAPI can use with Depends().

    Example:
        >>> container = Container()
        >>> container.set(UserRepository, {"dsn": "sqlite://"})
        >>> get_user_repo = create_fastapi_dependency(Injector(container), UserRepository)
        >>>
        >>> @app.get("/users")
        >>> async def list_users(repo: UserRepository = Depends(get_user_repo)):
        ...     return repo.get_all()
    """

    def dependency() -> Any:
        """Resolve the target through the injector."""
        return injector.invoke(target, method_name, args)

    return dependency


def create_request_dependency(
    target: Any,
    method_name: Optional[str] = None,
    args: Optional[Mapping[str, Any]] = None,
) -> Callable[[Request], Any]:
    """Create a FastAPI dependency that resolves through the request's injector.

    Requires the InjectorMiddleware to be installed.

    Args:
        target: A class, string identifier, live object or callable.
        method_name: Optional method to call on the resolved target.
        args: Explicit values for the method's primitive parameters.

    Returns:
        A callable taking the current request.
    """

    def request_dependency(request: Request) -> Any:
        """Resolve through the injector attached to the request."""
        if not hasattr(request.state, "injector"):
            raise RuntimeError("Request does not have an injector. Did you forget to add InjectorMiddleware?")
        injector: IInjector = request.state.injector
        return injector.invoke(target, method_name, args)

    return request_dependency


class InjectorMiddleware(BaseHTTPMiddleware):
    """Middleware that exposes an injector on every request.

    The injector is accessible via `request.state.injector`.

    Attributes:
        injector: The injector attached to each request.

    Example:
        >>> app = FastAPI()
        >>> app.add_middleware(InjectorMiddleware, injector=Injector(container))
        >>>
        >>> @app.get("/cars/{doors}")
        >>> async def build_car(request: Request):
        ...     return request.state.injector.invoke(Car)
    """

    def __init__(self, app: FastAPI, injector: IInjector):
        """Initialize the middleware with the injector to expose.

        Args:
            app: The FastAPI/Starlette application.
            injector: The injector to attach to requests.
        """
        super().__init__(app)
        self.injector = injector

    async def dispatch(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        """Attach the injector to the request and execute the endpoint.

        Args:
            request: The incoming HTTP request.
            call_next: The next middleware or endpoint handler.

        Returns:
            The response from the endpoint.
        """
        request.state.injector = self.injector
        return await call_next(request)
