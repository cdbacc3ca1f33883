"""Path resolution against the asset table."""

from perch.routing.resolver import CANDIDATES, resolve

__all__ = ["CANDIDATES", "resolve"]
