"""
Minecraft Config Utils

Config parsing helpers and lookup tables for Minecraft server plugins:
human readable durations, areas, potion effects, item lists, enchantment
names and spawn eggs.

Version: 1.0.0
"""

__version__ = "1.0.0"
__description__ = "Config parsing helpers and lookup tables for Minecraft server plugins"

from .config_loader import ConfigError, load_config, load_config_text
from .config_parsing import parse_area, parse_areas, parse_item_map, parse_key_value_map, parse_potion_effects
from .config_section import ConfigurationSection
from .duration import TimeUnit, parse_duration, parse_duration_as_ticks
from .enchantments import EnchantmentNames
from .registries import Enchantment, PotionEffectType, WorldRegistry
from .spawn_eggs import get_entity_type, get_spawn_egg, is_spawn_egg

__all__ = [
    "ConfigError",
    "ConfigurationSection",
    "Enchantment",
    "EnchantmentNames",
    "PotionEffectType",
    "TimeUnit",
    "WorldRegistry",
    "get_entity_type",
    "get_spawn_egg",
    "is_spawn_egg",
    "load_config",
    "load_config_text",
    "parse_area",
    "parse_areas",
    "parse_duration",
    "parse_duration_as_ticks",
    "parse_item_map",
    "parse_key_value_map",
    "parse_potion_effects",
]
