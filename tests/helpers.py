"""
Helper utilities for tests.
"""

from starlette.responses import Response


def add_header(name: str, value: str):
    """Middleware factory that adds a response header after the inner endpoint runs."""
    def middleware(endpoint):
        async def wrapped(request):
            response = await endpoint(request)
            response.headers.append(name, value)
            return response

        return wrapped

    return middleware


def record(events: list[str], label: str):
    """Middleware factory that records entry and exit around the inner endpoint."""
    def middleware(endpoint):
        async def wrapped(request):
            events.append(f"{label}:in")
            response = await endpoint(request)
            events.append(f"{label}:out")
            return response

        return wrapped

    return middleware


async def write_200(request):
    return Response(status_code=200)


class RecordingMultiplexer:
    """Stands in for a router and keeps every add_route call."""

    def __init__(self):
        self.routes = []

    def add_route(self, path, endpoint, methods=None, name=None):
        self.routes.append((path, endpoint, methods, name))

    @property
    def paths(self) -> list[str]:
        return [path for path, *_ in self.routes]
