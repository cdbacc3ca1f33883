"""Request path → Asset resolution.

Resolution is an ordered chain of candidate keys tried against the
table; the first key present wins::

    /about      exact key
    /about      + ".html"  → /about.html
    /docs/      trailing slash trimmed → /docs  (only when it ends in "/")

Each step is a plain function so a new fallback (``.htm``, say) is one
more entry in ``CANDIDATES``.
"""

from collections.abc import Callable, Mapping
from typing import TypeAlias

from perch.assets.table import Asset

Candidate: TypeAlias = Callable[[str], str | None]


def exact(path: str) -> str | None:
    return path


def html_suffix(path: str) -> str | None:
    """``/about`` → ``/about.html``."""
    return path + ".html"


def trailing_slash(path: str) -> str | None:
    """``/docs/`` → ``/docs``. Not re-suffixed with ``.html``."""
    if path.endswith("/"):
        return path[:-1]
    return None


CANDIDATES: tuple[Candidate, ...] = (exact, html_suffix, trailing_slash)


def resolve(
    table: Mapping[str, Asset],
    path: str,
    candidates: tuple[Candidate, ...] = CANDIDATES,
) -> Asset | None:
    """Return the first asset any candidate key finds, or ``None``."""
    for candidate in candidates:
        key = candidate(path)
        if key is None:
            continue
        asset = table.get(key)
        if asset is not None:
            return asset
    return None
