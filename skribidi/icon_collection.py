"""A named set of icons."""

from __future__ import annotations

import itertools
from pathlib import Path
from typing import Iterator, Optional, Union

from skribidi.geometry import Rect2
from skribidi.icon import Icon
from skribidi.picosvg import load_svg_icon


class IconCollection:
    """Icons that can be looked up by name."""

    _ids = itertools.count(1)

    def __init__(self) -> None:
        self.id: int = next(IconCollection._ids)
        self.icons: list[Icon] = []
        self._lookup: dict[str, int] = {}

    def _register(self, name: str, icon: Icon) -> Icon:
        self.icons.append(icon)
        self._lookup[name] = len(self.icons) - 1
        return icon

    def add_icon(self, name: str, width: float, height: float) -> Icon:
        """Add an empty icon of the given size and return it."""
        icon = Icon(name=name, view=Rect2(0.0, 0.0, width, height))
        return self._register(name, icon)

    def add_picosvg_icon(self, name: str, file_path: Union[str, Path]) -> Icon:
        """Load an icon from a picosvg file and add it under name."""
        if not name:
            raise ValueError("icon name must not be empty")
        icon = load_svg_icon(file_path)
        icon.name = name
        return self._register(name, icon)

    def find_icon(self, name: str) -> Optional[Icon]:
        """Return the icon most recently added under name, or None."""
        index = self._lookup.get(name)
        return None if index is None else self.icons[index]

    def __len__(self) -> int:
        return len(self.icons)

    def __iter__(self) -> Iterator[Icon]:
        return iter(self.icons)