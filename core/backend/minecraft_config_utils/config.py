"""
Configuration for Minecraft Config Utils

Defines parse defaults, game constants and bundled resource locations.
"""

from pathlib import Path

# Package directory - bundled data files live next to the modules
PACKAGE_DIR = Path(__file__).parent
RESOURCES_DIR = PACKAGE_DIR / "resources"
ENCHANTMENTS_CSV = RESOURCES_DIR / "enchantments.csv"

# Game timing: one server tick is 50 milliseconds (20 ticks per second)
TICK_MILLIS = 50

# Anything at or above this duration is treated as permanent
PERMANENT_DAYS = 365 * 1000

# Area parsing defaults
DEFAULT_LOWER_Y_BOUND = 0
DEFAULT_UPPER_Y_BOUND = 255
MISSING_SIZE = -1

# Potion effect defaults (duration is in ticks)
DEFAULT_POTION_DURATION = 200
DEFAULT_POTION_AMPLIFIER = 0

# Item stack defaults
DEFAULT_ITEM_AMOUNT = 1

# Namespace prefix accepted in front of material / entity identifiers
MINECRAFT_NAMESPACE = "minecraft:"

# Config path separator used by ConfigurationSection lookups
PATH_SEPARATOR = "."
