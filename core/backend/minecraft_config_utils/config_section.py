"""
Configuration Sections

Read-only view over a hierarchical config tree (nested dicts as produced
by yaml.safe_load). Values are addressed by key or by dotted path, e.g.
"center.x", relative to the section.
"""

import logging
import math
from typing import Any, Dict, List, Mapping, Optional

from .config import DEFAULT_ITEM_AMOUNT, PATH_SEPARATOR
from .models import ItemStack
from .registries import normalize_key

logger = logging.getLogger(__name__)

_MISSING = object()


def _stringify_keys(data: Mapping) -> Dict[str, Any]:
    """YAML allows non-string keys (e.g. 1: or true:), config paths are always strings"""
    return {
        str(key): _stringify_keys(value) if isinstance(value, Mapping) else value
        for key, value in data.items()
    }


class ConfigurationSection:
    """A section of a config tree"""

    def __init__(self, data: Optional[Mapping[str, Any]] = None, path: str = ""):
        """
        Args:
            data: Mapping holding this section's children
            path: Full dotted path of this section from the root ("" for the root)
        """
        self._data: Dict[str, Any] = _stringify_keys(data or {})
        self._path = path

    @property
    def current_path(self) -> str:
        return self._path

    @property
    def name(self) -> str:
        return self._path.rsplit(PATH_SEPARATOR, 1)[-1]

    def get_keys(self) -> List[str]:
        """Direct child keys of this section, in file order"""
        return list(self._data)

    def _child_path(self, path: str) -> str:
        return f"{self._path}{PATH_SEPARATOR}{path}" if self._path else path

    def _lookup(self, path: str) -> Any:
        node: Any = self._data
        for part in path.split(PATH_SEPARATOR):
            if not isinstance(node, Mapping):
                return _MISSING
            if part in node:
                node = node[part]
            else:
                node = _MISSING
                break
        return node

    def contains(self, path: str) -> bool:
        return self._lookup(path) is not _MISSING

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and self.contains(path)

    def is_section(self, path: str) -> bool:
        return isinstance(self._lookup(path), Mapping)

    def get_section(self, path: str) -> Optional["ConfigurationSection"]:
        value = self._lookup(path)
        if isinstance(value, Mapping):
            return ConfigurationSection(value, self._child_path(path))
        return None

    def is_string(self, path: str) -> bool:
        return isinstance(self._lookup(path), str)

    def get_string(self, path: str, default: Optional[str] = None) -> Optional[str]:
        """
        Value at path as a string

        Scalars (numbers, booleans) are converted; sections, lists and
        missing values give default.
        """
        value = self._lookup(path)
        if value is _MISSING or value is None or isinstance(value, (Mapping, list)):
            return default
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    def get_int(self, path: str, default: int = 0) -> int:
        """
        Value at path as an int

        Finite numbers are truncated, numeric strings are parsed; anything
        else gives default.
        """
        value = self._lookup(path)
        if isinstance(value, bool):
            return default
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            # .inf and .nan are valid YAML floats
            return int(value) if math.isfinite(value) else default
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                return default
        return default

    def get_string_list(self, path: str) -> List[str]:
        value = self._lookup(path)
        if not isinstance(value, list):
            return []
        return [str(item) for item in value if item is not None and not isinstance(item, (Mapping, list))]

    def get_item_stack(self, path: str) -> Optional[ItemStack]:
        """
        Item stack stored as a section at path

        Expected layout::

            type: DIAMOND
            amount: 3          # optional, default 1
            name: Shiny        # optional display name
            lore: [a, b]       # optional

        Returns:
            The item stack, or None if the section is missing, has no type
            or has a non-positive amount
        """
        section = self.get_section(path)
        if section is None:
            return None
        material = section.get_string("type")
        if not material:
            logger.debug(f"No item type at {section.current_path}")
            return None
        amount = section.get_int("amount", DEFAULT_ITEM_AMOUNT)
        if amount <= 0:
            logger.debug(f"Invalid item amount {amount} at {section.current_path}")
            return None
        return ItemStack(
            material=normalize_key(material),
            amount=amount,
            display_name=section.get_string("name"),
            lore=tuple(section.get_string_list("lore")),
        )

    def __repr__(self) -> str:
        return f"ConfigurationSection(path={self._path!r}, keys={self.get_keys()!r})"
