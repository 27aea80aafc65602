"""
Enchantment Names

Loads and stores display names of enchantments, e.g. DIG_SPEED -> Efficiency.
"""

import csv
import logging
from pathlib import Path
from typing import Callable, Dict, Iterable, Optional, Union

from .config import ENCHANTMENTS_CSV
from .registries import Enchantment

logger = logging.getLogger(__name__)

EnchantmentResolver = Callable[[str], Optional[Enchantment]]


class EnchantmentNames:
    """
    Lookup table of enchantment display names and initials

    Filled by load() from a CSV file with rows ``slug,name[,initials]``;
    read-only until the next load() or clear().
    """

    def __init__(self, resolver: EnchantmentResolver = Enchantment.get_by_name):
        """
        Args:
            resolver: Maps a slug from the CSV to an enchantment, None if unknown
        """
        self.resolver = resolver
        self._names: Dict[Enchantment, str] = {}
        self._initials: Dict[Enchantment, str] = {}

    def clear(self):
        """Resets all enchantment names and initials"""
        self._names.clear()
        self._initials.clear()

    def load(self, csv_path: Optional[Union[str, Path]] = None) -> int:
        """
        Loads enchantment names and initials, replacing the current ones

        Args:
            csv_path: CSV file to read (default: the bundled enchantments.csv)

        Returns:
            Number of enchantments loaded
        """
        self.clear()
        csv_path = Path(csv_path) if csv_path else ENCHANTMENTS_CSV
        if not csv_path.exists():
            logger.warning(f"Could not load enchantments from {csv_path.name} as the file does not exist.")
            return 0
        try:
            with open(csv_path, 'r', encoding='utf-8', errors='replace', newline='') as f:
                self.load_rows(f)
        except OSError as e:
            logger.warning(f"Could not load enchantments from {csv_path.name}: {e}")
        return len(self._names)

    def load_rows(self, lines: Iterable[str]):
        """Adds every valid ``slug,name[,initials]`` row, skipping bad ones with a warning"""
        for values in csv.reader(lines):
            line = ",".join(values)
            if not values or not line.strip():
                continue
            if len(values) < 2:
                logger.warning(f"This enchantment row does not have enough data: {line}")
                continue
            enchantment = self.resolver(values[0].strip())
            if enchantment is None:
                logger.warning(f"Could not find an enchantment on this line: {line}")
                continue
            name = values[1].strip()
            if not name:
                logger.warning(f"This enchantment has not been given a name: {line}")
                continue
            self._names[enchantment] = name
            if len(values) > 2 and values[2].strip():
                self._initials[enchantment] = values[2].strip()
            logger.debug(f"Enchantment parsed: {enchantment.name} = {name}")

    def get_name(self, enchantment: Enchantment) -> Optional[str]:
        """
        Gets an enchantment's name, e.g: DIG_SPEED to Efficiency

        Args:
            enchantment: The enchantment to get the name of

        Returns:
            The enchantment's name, or None if none is set

        Raises:
            ValueError: If the given enchantment is None
        """
        if enchantment is None:
            raise ValueError("Cannot retrieve the enchantment's name; the enchantment is None.")
        return self._names.get(enchantment)

    def get_initials(self, enchantment: Enchantment) -> Optional[str]:
        """Gets an enchantment's initials, e.g: DIG_SPEED to E. Raises ValueError for None."""
        if enchantment is None:
            raise ValueError("Cannot retrieve the enchantment's initials; the enchantment is None.")
        return self._initials.get(enchantment)

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, enchantment: object) -> bool:
        return enchantment in self._names
