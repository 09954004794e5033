HTTP_METHODS = frozenset({"GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "CONNECT", "TRACE"})


def normalize_prefix(prefix: str) -> str:
    """Normalizes a mount prefix so that it starts with a single '/' and does not end with one.

    The root prefix ("/" or "") normalizes to an empty string.

    Examples:
        >>> normalize_prefix("api/")
        '/api'
        >>> normalize_prefix("//api")
        '/api'
        >>> normalize_prefix("/")
        ''
    """
    prefix = prefix.strip().strip("/")
    if not prefix:
        return ""

    return "/" + prefix


def join_path(prefix: str, pattern: str) -> str:
    """Joins a normalized prefix and a route pattern with exactly one '/' between them.

    Only the seam is touched, anything after it is passed through as given.

    Examples:
        >>> join_path("/api", "/users")
        '/api/users'
        >>> join_path("/api", "")
        '/api'
        >>> join_path("", "")
        '/'
    """
    if not pattern:
        return prefix or "/"

    return f"{prefix}/{pattern.lstrip('/')}"


def split_pattern(pattern: str) -> tuple[list[str] | None, str]:
    """Splits an optional leading HTTP method off a pattern, e.g. "GET /users".

    Methods are case-sensitive and must be upper case.

    Raises:
        ValueError: When the method is not upper case or is not followed by a path.
    """
    tokens = pattern.split(maxsplit=1)
    if tokens and tokens[0].upper() in HTTP_METHODS:
        method = tokens[0]
        if method != method.upper():
            raise ValueError(f"HTTP method in pattern {pattern!r} must be upper case")

        if len(tokens) == 1:
            raise ValueError(f"Pattern {pattern!r} has a method but no path")

        return [method], tokens[1].strip()

    return None, pattern.strip()
