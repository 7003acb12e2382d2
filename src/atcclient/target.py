r"""Contain the connection target of an ATC client."""

from __future__ import annotations

__all__ = ["Target"]

from dataclasses import dataclass
from typing import TYPE_CHECKING

from atcclient.core.validation import validate_api

if TYPE_CHECKING:
    import httpx


@dataclass(frozen=True)
class Target:
    r"""Connection parameters identifying an ATC and the identity used
    to talk to it.

    Args:
        api: The base API URL, e.g. ``"https://ci.example.com"``.
        username: The basic auth username. Blank means no auth.
        password: The basic auth password. Blank means no auth.
        cert: Path to a PEM file holding a client certificate and its
            key, for mutual TLS. Blank means no client certificate.
        insecure: If ``True``, the server certificate is not verified.

    Example:
        ```pycon
        >>> from atcclient.target import Target
        >>> target = Target("https://ci.example.com", username="admin", password="secret")
        >>> target.has_credentials
        True
        >>> Target("https://ci.example.com", username="admin").has_credentials
        False

        ```
    """

    api: str
    username: str = ""
    password: str = ""
    cert: str = ""
    insecure: bool = False

    @property
    def has_credentials(self) -> bool:
        r"""Indicate if both the username and the password are set."""
        return bool(self.username.strip()) and bool(self.password.strip())

    def validate(self) -> httpx.URL:
        r"""Validate the target.

        Returns:
            The parsed base API URL, which requests are built from.

        Raises:
            ConfigurationError: If ``api`` is blank, is not an absolute
                http(s) URL, or carries a query string or a fragment.
        """
        return validate_api(self.api)

    def __repr__(self) -> str:
        password = "***" if self.password else ""
        return (
            f"{self.__class__.__qualname__}(api={self.api!r}, username={self.username!r}, "
            f"password={password!r}, cert={self.cert!r}, insecure={self.insecure})"
        )
