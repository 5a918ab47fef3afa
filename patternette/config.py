from __future__ import annotations

"""Render configuration for Patternette.

`RenderOptions` groups every display knob used by text rendering and the Rich
tree view. Options can be built in code or loaded from a YAML mapping:

```yaml
count_template: "Size:{count}"
indent: "  "
max_children: 5
```
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = ["RenderOptions", "load_options", "DEFAULT_OPTIONS"]


class RenderOptions(BaseModel):  # noqa: D101 – self-documenting via fields
    model_config = ConfigDict(extra="forbid", frozen=True)

    # Text rendering
    count_template: str = "{count} children"
    leaf_label: str = "Leaf"
    leaf2_label: str = "Leaf2"
    indent: str = ""  # repeated `depth` times in front of each line

    # Rich tree view
    icons_on: bool = True
    max_children: Optional[int] = Field(default=None, ge=1)

    @field_validator("count_template")
    @classmethod
    def _has_count_field(cls, value: str) -> str:
        if "{count}" not in value:
            raise ValueError("count_template must contain '{count}'")
        try:
            value.format(count=0)
        except (KeyError, IndexError, ValueError) as e:
            raise ValueError(f"count_template may only use the '{{count}}' field: {e!r}") from e
        return value

    # -------------------------------------------------- #

    def count_line(self, count: int) -> str:
        return self.count_template.format(count=count)

    def prefix(self, depth: int) -> str:
        return self.indent * depth


DEFAULT_OPTIONS = RenderOptions()


def load_options(path: str | Path) -> RenderOptions:  # noqa: D401
    """Load a YAML mapping at *path* into :class:`RenderOptions`."""
    data: Dict[str, Any] | None = yaml.safe_load(Path(path).read_text())
    if data is None:
        return RenderOptions()
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping of render options")
    return RenderOptions.model_validate(data)
