# utils/router.py
import logging
import re
from dataclasses import dataclass, field

from .responses import text_reply

logger = logging.getLogger(__name__)

DEFAULT_METHODS = ('GET',)


def compile_pattern(pattern):
    """Turn a glob route pattern into an anchored regex.

    ``*`` matches within one path segment, ``#`` matches across segments and
    ``?`` matches a single non-slash character. Every wildcard is a capture
    group so its text can be handed to the handler.
    """
    parts = []
    for char in pattern:
        if char == '*':
            parts.append(r'([^/]*)')
        elif char == '#':
            parts.append(r'(.*)')
        elif char == '?':
            parts.append(r'([^/])')
        else:
            parts.append(re.escape(char))
    return re.compile('^' + ''.join(parts) + '$')


def path_ints(*segments):
    """Captured segments as ints, or None unless every one is plain ASCII digits.

    ``int()`` alone would also take ``+1``, `` 1`` and ``4_3``.
    """
    if not all(s.isascii() and s.isdigit() for s in segments):
        return None
    return [int(s) for s in segments]


def normalize_path(path):
    if len(path) > 1 and path.endswith('/'):
        return path.rstrip('/') or '/'
    return path or '/'


@dataclass
class Route:
    pattern: str
    handler: object
    methods: tuple = DEFAULT_METHODS
    regex: re.Pattern = field(init=False, repr=False)

    def __post_init__(self):
        self.methods = tuple(m.upper() for m in self.methods)
        self.regex = compile_pattern(self.pattern)

    def match(self, path):
        """Return the captured wildcard values, or None if the path doesn't fit."""
        m = self.regex.match(path)
        return m.groups() if m else None

    def allows(self, method):
        method = method.upper()
        if method == 'HEAD':
            method = 'GET'
        return method in self.methods


class Router:
    """Ordered (pattern, handler) table; the first matching pattern wins."""

    def __init__(self):
        self.routes = []

    def add(self, pattern, handler, methods=DEFAULT_METHODS):
        self.routes.append(Route(pattern, handler, tuple(methods)))
        return handler

    def route(self, pattern, methods=DEFAULT_METHODS):
        """Decorator form of ``add``."""
        def decorator(f):
            return self.add(pattern, f, methods)
        return decorator

    def match(self, path, method='GET'):
        """Find the route for a request.

        Returns ``(route, params)`` for the first route whose pattern and
        method both fit, ``(None, None)`` when only the method was wrong and
        ``None`` when no pattern matches at all.
        """
        path = normalize_path(path)
        path_matched = False
        for route in self.routes:
            params = route.match(path)
            if params is None:
                continue
            if route.allows(method):
                return route, params
            path_matched = True
        return (None, None) if path_matched else None

    def dispatch(self, path, method='GET'):
        found = self.match(path, method)
        if found is None:
            logger.info(f"No route for {method} {path}")
            return text_reply("Not found\n", 404)
        route, params = found
        if route is None:
            logger.info(f"Method {method} not allowed for {path}")
            return text_reply("Method not allowed\n", 405)
        return route.handler(*params)

    def describe(self):
        return ''.join(
            f"{','.join(route.methods)} {route.pattern}\n" for route in self.routes
        )
