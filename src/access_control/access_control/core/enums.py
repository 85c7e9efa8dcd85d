from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Closed set of user roles; each role owns one page and one set of API routes."""

    SECURITY = "security"
    AUTHORIZER = "authorizer"
    CONTROLLER = "controller"


class Direction(str, Enum):
    """Inferred movement of a scan. Derived on demand, never stored."""

    ENTRY = "Entry"
    EXIT = "Exit"
