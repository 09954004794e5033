import logging
from typing import Callable, Sequence, overload

from starlette.routing import get_name

from routegroup.middleware import compose
from routegroup.paths import join_path, normalize_prefix, split_pattern
from routegroup.protocols import Endpoint, Middleware, MultiplexerProtocol

logger = logging.getLogger(__name__)


class Bundle:
    """A group of routes sharing a path prefix and a middleware chain.

    Bundles never match or dispatch requests themselves. Every handler is
    wrapped in the bundle's middleware and handed to the multiplexer the
    bundle is bound to, under the bundle's prefix.

    Examples:
        >>> router = starlette.routing.Router()
        >>> api = mount(router, "/api")
        >>> api.use(require_token)
        >>> api.handle("GET /users", list_users)
        # GET /api/users now runs require_token, then list_users
    """

    def __init__(self, multiplexer: MultiplexerProtocol, prefix: str = "", middleware: Sequence[Middleware] = ()):
        if multiplexer is None:
            raise ValueError("A bundle must be bound to a multiplexer, got None")

        self.multiplexer = multiplexer
        self.prefix = normalize_prefix(prefix)
        self.middleware: list[Middleware] = list(middleware)

    def __repr__(self) -> str:
        return f"<Bundle prefix={self.prefix!r} middleware={len(self.middleware)}>"

    def use(self, *middleware: Middleware) -> None:
        """Appends middleware to this bundle's chain.

        Only routes registered after the call are wrapped by the new middleware.
        """
        self.middleware.extend(middleware)

    def with_(self, *middleware: Middleware) -> "Bundle":
        """Returns a new bundle with this bundle's chain followed by the given middleware.

        This bundle is left unchanged, so routes registered on it afterwards do not
        see the extra middleware.
        """
        return Bundle(self.multiplexer, self.prefix, [*self.middleware, *middleware])

    def set(self, configurator: Callable[["Bundle"], None]) -> None:
        """Calls the configurator with this bundle, for grouping setup code in one place."""
        configurator(self)

    def group(self) -> "Bundle":
        """Returns a child bundle with the same prefix and a copy of the middleware chain."""
        return self.with_()

    def route(self, configurator: Callable[["Bundle"], None]) -> "Bundle":
        """Creates a child bundle with ``group`` and configures it with the given callable."""
        child = self.group()
        configurator(child)
        return child

    def mount(self, prefix: str) -> "Bundle":
        """Returns a child bundle under ``prefix`` relative to this bundle.

        The child inherits a copy of the current middleware chain.
        """
        path = join_path(self.prefix, normalize_prefix(prefix))
        logger.debug(f"Mounting bundle at {path}")
        return Bundle(self.multiplexer, path, self.middleware)

    @overload
    def handle(
        self, pattern: str, *, methods: Sequence[str] | None = None, name: str | None = None
    ) -> Callable[[Endpoint], Endpoint]: ...

    @overload
    def handle(
        self, pattern: str, handler: Endpoint, *, methods: Sequence[str] | None = None, name: str | None = None
    ) -> None: ...

    def handle(self, pattern, handler=None, *, methods=None, name=None):
        """Registers a handler on the multiplexer under this bundle's prefix.

        The handler is wrapped in the bundle's middleware chain as it stands at the
        time of the call. The pattern may start with an HTTP method, "POST /users",
        to restrict the route to that method.

        Args:
            pattern: The path pattern relative to the bundle prefix.
            handler: The endpoint. When omitted a decorator is returned instead.
            methods: HTTP methods to accept. Cannot be combined with a method in the pattern.
            name: Route name passed on to the multiplexer. Defaults to the name of the handler,
                not of the middleware wrapping it.

        Raises:
            ValueError: When methods are given both in the pattern and as an argument, or the
                pattern carries a malformed method.

        Examples:
            >>> bundle.handle("/health", health)
            >>> @bundle.handle("GET /items/{item_id}")
            ... async def get_item(request): ...
        """
        if handler is None:
            def decorator(func: Endpoint) -> Endpoint:
                self.handle(pattern, func, methods=methods, name=name)
                return func

            return decorator

        if isinstance(methods, str):
            methods = [methods]

        if methods is not None and not all(isinstance(method, str) for method in methods):
            raise ValueError("Methods must be strings")

        pattern_methods, path = split_pattern(pattern)
        if pattern_methods and methods:
            raise ValueError("Methods cannot be specified both in the pattern and as an argument")

        methods = pattern_methods or methods
        path = join_path(self.prefix, path)
        endpoint = compose(self.middleware, handler)
        logger.debug(
            f"Registering {getattr(handler, '__name__', handler)!s} at {path} "
            f"(methods={sorted(methods) if methods else 'any'}, middleware={len(self.middleware)})"
        )
        self.multiplexer.add_route(
            path,
            endpoint,
            methods=[method.upper() for method in methods] if methods else None,
            name=name if name is not None else get_name(handler),
        )


def new(multiplexer: MultiplexerProtocol) -> Bundle:
    """Creates a root bundle with no prefix and no middleware."""
    return Bundle(multiplexer)


def mount(multiplexer: MultiplexerProtocol, prefix: str) -> Bundle:
    """Creates a root bundle under ``prefix`` with no middleware."""
    logger.debug(f"Mounting bundle at {normalize_prefix(prefix) or '/'}")
    return Bundle(multiplexer, prefix)
