r"""Resolve symbolic operation names to HTTP methods and paths.

A ``RouteTable`` maps operation names to ``Route`` objects. It is built
once and injected into the client, and it is never mutated afterwards.
"""

from __future__ import annotations

__all__ = ["Route", "RouteTable"]

import logging
import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING
from urllib.parse import quote

from atcclient.exceptions import MissingPathParamError, UnknownOperationError

if TYPE_CHECKING:
    from collections.abc import Iterable

logger: logging.Logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"\{([^{}/]+)\}")


@dataclass(frozen=True)
class Route:
    r"""Define the HTTP method and the path template of an operation.

    Args:
        name: The symbolic operation name, e.g. ``"GetBuild"``.
        method: The HTTP method, e.g. ``"GET"``.
        path: The path template, with ``{name}`` placeholders, e.g.
            ``"/api/v1/builds/{build_id}"``.
    """

    name: str
    method: str
    path: str

    @property
    def placeholders(self) -> tuple[str, ...]:
        r"""The placeholder names of the path template, in order."""
        return tuple(_PLACEHOLDER.findall(self.path))

    def create_path(self, params: Mapping[str, str]) -> str:
        r"""Substitute the path parameters in the path template.

        Each value is URL-escaped, so a value cannot introduce a new
        path segment or a query string.

        Args:
            params: The path parameter values, by placeholder name.

        Returns:
            The path with every placeholder substituted.

        Raises:
            MissingPathParamError: If a placeholder has no value.
        """

        def substitute(match: re.Match[str]) -> str:
            key = match.group(1)
            if key not in params:
                raise MissingPathParamError(self.name, key)
            return quote(str(params[key]), safe="")

        return _PLACEHOLDER.sub(substitute, self.path)


class RouteTable(Mapping[str, Route]):
    r"""Implement an immutable table of routes indexed by operation name.

    Args:
        routes: The routes of the table.

    Raises:
        ValueError: If two routes share the same name.

    Example:
        ```pycon
        >>> from atcclient.routes import Route, RouteTable
        >>> table = RouteTable([Route("GetBuild", "GET", "/api/v1/builds/{build_id}")])
        >>> table.resolve("GetBuild", {"build_id": "42"})
        ('GET', '/api/v1/builds/42')

        ```
    """

    def __init__(self, routes: Iterable[Route] = ()) -> None:
        table: dict[str, Route] = {}
        for route in routes:
            if route.name in table:
                msg = f"duplicate route name: {route.name!r}"
                raise ValueError(msg)
            table[route.name] = route
        self._routes = MappingProxyType(table)

    def __getitem__(self, name: str) -> Route:
        return self._routes[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._routes)

    def __len__(self) -> int:
        return len(self._routes)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({list(self._routes.values())!r})"

    def resolve(self, name: str, params: Mapping[str, str] | None = None) -> tuple[str, str]:
        r"""Resolve an operation to its HTTP method and path.

        Args:
            name: The operation name.
            params: The path parameter values, by placeholder name.
                Values without a matching placeholder are ignored.

        Returns:
            A tuple with the upper-case HTTP method and the path. The
            path has no host and no query string.

        Raises:
            UnknownOperationError: If no route is registered for ``name``.
            MissingPathParamError: If the path template references a
                parameter missing from ``params``.
        """
        route = self._routes.get(name)
        if route is None:
            raise UnknownOperationError(name)
        path = route.create_path(params or {})
        logger.debug(f"Resolved operation {name} to {route.method.upper()} {path}")
        return route.method.upper(), path
