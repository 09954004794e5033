from functools import reduce, wraps
from typing import Iterable

from starlette.requests import Request
from starlette.responses import Response

from routegroup.protocols import Dispatch, Endpoint, Middleware


def compose(chain: Iterable[Middleware], endpoint: Endpoint) -> Endpoint:
    """Wraps an endpoint in a middleware chain.

    The chain is folded right to left so the first middleware ends up as the
    outermost wrapper: it sees the request first and the response last.

    Args:
        chain: Middleware in registration order.
        endpoint: The endpoint at the center of the chain.

    Returns:
        The composed endpoint. With an empty chain this is the endpoint itself.
    """
    return reduce(lambda wrapped, middleware: middleware(wrapped), reversed(list(chain)), endpoint)


def from_dispatch(dispatch: Dispatch) -> Middleware:
    """Adapts a ``dispatch(request, call_next)`` coroutine into a bundle middleware.

    This is the same shape Starlette's ``BaseHTTPMiddleware.dispatch`` uses, so
    existing dispatch functions can be scoped to a single bundle instead of the
    whole application.

    Examples:
        >>> async def timing(request, call_next):
        ...     response = await call_next(request)
        ...     response.headers["X-Handled"] = "true"
        ...     return response
        >>> api.use(from_dispatch(timing))
    """
    def middleware(endpoint: Endpoint) -> Endpoint:
        @wraps(endpoint)
        async def wrapped(request: Request) -> Response:
            return await dispatch(request, endpoint)

        return wrapped

    middleware.__name__ = getattr(dispatch, "__name__", middleware.__name__)
    return middleware
