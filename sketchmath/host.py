"""Host environment queries - user agent and style properties.

The numeric helpers never touch the host. Sketches that need to know whether
they run on a phone, or that read theme values, go through a small
`HostEnvironment` so the queries can be answered by a browser bridge, the
process environment, or a fixed snapshot in tests.
"""

from __future__ import annotations
import os
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from .config import MOBILE_UA_PATTERN, USER_AGENT_ENV
from .formatting import css_to_rgb
from .logging import log
from .types import RGB

_MOBILE_RE = re.compile(MOBILE_UA_PATTERN, re.IGNORECASE)


class HostEnvironment(ABC):
    """Read-only view of the environment a sketch runs in."""

    @abstractmethod
    def user_agent(self) -> str:
        """User agent string, or "" when unknown."""

    @abstractmethod
    def style_property(self, name: str) -> str:
        """Raw value of a named style property, or "" when unset."""


@dataclass
class StaticHost(HostEnvironment):
    """Host answering from fixed values."""
    agent: str = ""
    styles: Dict[str, str] = field(default_factory=dict)

    def user_agent(self) -> str:
        return self.agent

    def style_property(self, name: str) -> str:
        return self.styles.get(name, "")


class EnvironHost(HostEnvironment):
    """Host reading the user agent from the process environment."""

    def __init__(self, styles: Optional[Mapping[str, str]] = None, env_var: str = USER_AGENT_ENV):
        self._styles: Dict[str, str] = dict(styles or {})
        self._env_var = env_var

    def user_agent(self) -> str:
        return os.environ.get(self._env_var, "")

    def style_property(self, name: str) -> str:
        return self._styles.get(name, "")


_host: Optional[HostEnvironment] = None


def get_host() -> HostEnvironment:
    """Get the registered host, creating an EnvironHost on first use."""
    global _host
    if _host is None:
        _host = EnvironHost()
    return _host


def set_host(host: Optional[HostEnvironment]) -> None:
    """Register the host used when callers do not pass one. None resets."""
    global _host
    _host = host
    log(f"[HOST] Using {type(host).__name__ if host is not None else 'default host'}")


def is_mobile(host: Optional[HostEnvironment] = None) -> bool:
    """True if the host's user agent names a mobile browser."""
    h = host if host is not None else get_host()
    return _MOBILE_RE.search(h.user_agent()) is not None


def get_css_var(name: str, host: Optional[HostEnvironment] = None) -> str:
    """Style property value with all spaces stripped ("" when unset)."""
    h = host if host is not None else get_host()
    return h.style_property(name).replace(" ", "")


def get_css_color(name: str, host: Optional[HostEnvironment] = None) -> RGB:
    """Style property parsed as a CSS colour.

    Raises:
        ValueError: property is unset or not a colour.
    """
    value = get_css_var(name, host)
    if not value:
        raise ValueError(f"style property {name!r} is not set")
    return css_to_rgb(value)
