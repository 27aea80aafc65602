"""
Registries

Closed sets of game identifiers (enchantments, potion effect types) and
the world registry used to resolve world names found in config.
"""

import logging
from enum import Enum
from typing import Dict, Iterable, List, Optional

from .config import MINECRAFT_NAMESPACE
from .models import World

logger = logging.getLogger(__name__)


def normalize_key(name: str) -> str:
    """
    Normalize a material / entity / enchantment identifier

    Strips surrounding whitespace and the optional minecraft: namespace,
    then upper-cases, so "minecraft:bat_spawn_egg" becomes "BAT_SPAWN_EGG".
    """
    name = name.strip()
    if name.lower().startswith(MINECRAFT_NAMESPACE):
        name = name[len(MINECRAFT_NAMESPACE):]
    return name.upper()


class _NamedRegistry(Enum):
    """Enum whose members can be looked up leniently by name"""

    @classmethod
    def get_by_name(cls, name: Optional[str]):
        """
        Look up a member by name, ignoring case and namespace

        Returns:
            The member, or None if the name is unknown
        """
        if not isinstance(name, str) or not name.strip():
            return None
        return cls.__members__.get(normalize_key(name))

    @classmethod
    def from_name(cls, name: str):
        """Strict variant of get_by_name, raises ValueError for unknown names"""
        member = cls.get_by_name(name)
        if member is None:
            raise ValueError(f"No {cls.__name__} named {name!r}")
        return member


class Enchantment(_NamedRegistry):
    """Enchantments by their engine-internal slug"""
    PROTECTION_ENVIRONMENTAL = "protection"
    PROTECTION_FIRE = "fire_protection"
    PROTECTION_FALL = "feather_falling"
    PROTECTION_EXPLOSIONS = "blast_protection"
    PROTECTION_PROJECTILE = "projectile_protection"
    OXYGEN = "respiration"
    WATER_WORKER = "aqua_affinity"
    THORNS = "thorns"
    DEPTH_STRIDER = "depth_strider"
    FROST_WALKER = "frost_walker"
    BINDING_CURSE = "binding_curse"
    DAMAGE_ALL = "sharpness"
    DAMAGE_UNDEAD = "smite"
    DAMAGE_ARTHROPODS = "bane_of_arthropods"
    KNOCKBACK = "knockback"
    FIRE_ASPECT = "fire_aspect"
    LOOT_BONUS_MOBS = "looting"
    SWEEPING_EDGE = "sweeping"
    DIG_SPEED = "efficiency"
    SILK_TOUCH = "silk_touch"
    DURABILITY = "unbreaking"
    LOOT_BONUS_BLOCKS = "fortune"
    ARROW_DAMAGE = "power"
    ARROW_KNOCKBACK = "punch"
    ARROW_FIRE = "flame"
    ARROW_INFINITE = "infinity"
    LUCK = "luck_of_the_sea"
    LURE = "lure"
    LOYALTY = "loyalty"
    IMPALING = "impaling"
    RIPTIDE = "riptide"
    CHANNELING = "channeling"
    MULTISHOT = "multishot"
    QUICK_CHARGE = "quick_charge"
    PIERCING = "piercing"
    MENDING = "mending"
    VANISHING_CURSE = "vanishing_curse"
    SOUL_SPEED = "soul_speed"


class PotionEffectType(_NamedRegistry):
    """Potion effect types, value is the numeric effect id"""
    SPEED = 1
    SLOW = 2
    FAST_DIGGING = 3
    SLOW_DIGGING = 4
    INCREASE_DAMAGE = 5
    HEAL = 6
    HARM = 7
    JUMP = 8
    CONFUSION = 9
    REGENERATION = 10
    DAMAGE_RESISTANCE = 11
    FIRE_RESISTANCE = 12
    WATER_BREATHING = 13
    INVISIBILITY = 14
    BLINDNESS = 15
    NIGHT_VISION = 16
    HUNGER = 17
    WEAKNESS = 18
    POISON = 19
    WITHER = 20
    HEALTH_BOOST = 21
    ABSORPTION = 22
    SATURATION = 23
    GLOWING = 24
    LEVITATION = 25
    LUCK = 26
    UNLUCK = 27
    SLOW_FALLING = 28
    CONDUIT_POWER = 29
    DOLPHINS_GRACE = 30
    BAD_OMEN = 31
    HERO_OF_THE_VILLAGE = 32


class WorldRegistry:
    """Resolves world names to World handles"""

    def __init__(self, worlds: Optional[Iterable[World]] = None):
        self._worlds: Dict[str, World] = {}
        for world in worlds or []:
            self.register(world)

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "WorldRegistry":
        """
        Build a registry from plain world names

        Args:
            names: World names, e.g. the "worlds" list of a config file

        Returns:
            Registry containing one World per distinct, non-empty name
        """
        registry = cls()
        for name in names:
            if not isinstance(name, str) or not name:
                logger.warning(f"Ignoring invalid world name: {name!r}")
                continue
            registry.register(World(name))
        return registry

    def register(self, world: World):
        self._worlds[world.name] = world

    def get_world(self, name: Optional[str]) -> Optional[World]:
        if name is None:
            return None
        return self._worlds.get(name)

    def names(self) -> List[str]:
        return list(self._worlds)

    def __len__(self) -> int:
        return len(self._worlds)

    def __contains__(self, name: object) -> bool:
        return name in self._worlds
