"""
Protocol definitions for routegroup.

The host multiplexer is anything that registers an endpoint for a path the
way Starlette's router does. Bundles only ever call that one method.
"""

from abc import abstractmethod
from typing import Any, Awaitable, Callable, Protocol, Sequence, TypeAlias

from starlette.requests import Request
from starlette.responses import Response

Endpoint: TypeAlias = Callable[[Request], Awaitable[Response]]
Middleware: TypeAlias = Callable[[Endpoint], Endpoint]
CallNext: TypeAlias = Callable[[Request], Awaitable[Response]]
Dispatch: TypeAlias = Callable[[Request, CallNext], Awaitable[Response]]


class MultiplexerProtocol(Protocol):
    """Protocol for the host request multiplexer."""

    @abstractmethod
    def add_route(
        self,
        path: str,
        endpoint: Callable[..., Any],
        methods: Sequence[str] | None = None,
        name: str | None = None,
    ) -> None:
        """Register an endpoint for a path pattern."""
        ...
