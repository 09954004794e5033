from routegroup.bundle import Bundle, mount, new
from routegroup.middleware import compose, from_dispatch

__all__ = ["Bundle", "compose", "from_dispatch", "mount", "new"]
__version__ = "0.1.0"
