from __future__ import annotations

"""patternette.utils.ids
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
Tiny helper for consistent identifier formatting.

Exposes :func:`snake_case`, used to name events in JSON logs
(``ElementVisited`` → ``element_visited``).
"""

import re

__all__ = ["snake_case"]

_PATTERN = re.compile(r"[^a-zA-Z0-9]+")
_CAMEL = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def snake_case(text: str) -> str:  # noqa: D401
    """Return *text* converted to ``snake_case``.

    * CamelCase boundaries become ``_``
    * non‑alphanumeric chars become ``_``
    * multiple underscores are squeezed
    * leading/trailing underscores are stripped
    * everything lower‑cased
    """

    s = _CAMEL.sub("_", text)
    s = _PATTERN.sub("_", s)
    s = re.sub(r"_+", "_", s)
    return s.strip("_").lower()
