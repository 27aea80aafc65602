"""
Spawn Eggs

Fixed mapping between spawn egg materials and the entity types they spawn.
"""

from types import MappingProxyType
from typing import Mapping, Optional

from .registries import normalize_key

_SPAWN_EGGS = {
    "BAT_SPAWN_EGG": "BAT",
    "BLAZE_SPAWN_EGG": "BLAZE",
    "CAT_SPAWN_EGG": "CAT",
    "CAVE_SPIDER_SPAWN_EGG": "CAVE_SPIDER",
    "CHICKEN_SPAWN_EGG": "CHICKEN",
    "COD_SPAWN_EGG": "COD",
    "COW_SPAWN_EGG": "COW",
    "CREEPER_SPAWN_EGG": "CREEPER",
    "DOLPHIN_SPAWN_EGG": "DOLPHIN",
    "DONKEY_SPAWN_EGG": "DONKEY",
    "DROWNED_SPAWN_EGG": "DROWNED",
    "ELDER_GUARDIAN_SPAWN_EGG": "ELDER_GUARDIAN",
    "ENDERMAN_SPAWN_EGG": "ENDERMAN",
    "ENDERMITE_SPAWN_EGG": "ENDERMITE",
    "EVOKER_SPAWN_EGG": "EVOKER",
    "FOX_SPAWN_EGG": "FOX",
    "GHAST_SPAWN_EGG": "GHAST",
    "GUARDIAN_SPAWN_EGG": "GUARDIAN",
    "HORSE_SPAWN_EGG": "HORSE",
    "HUSK_SPAWN_EGG": "HUSK",
    "LLAMA_SPAWN_EGG": "LLAMA",
    "MAGMA_CUBE_SPAWN_EGG": "MAGMA_CUBE",
    "MOOSHROOM_SPAWN_EGG": "MUSHROOM_COW",
    "MULE_SPAWN_EGG": "MULE",
    "OCELOT_SPAWN_EGG": "OCELOT",
    "PANDA_SPAWN_EGG": "PANDA",
    "PARROT_SPAWN_EGG": "PARROT",
    "PHANTOM_SPAWN_EGG": "PHANTOM",
    "PIG_SPAWN_EGG": "PIG",
    "PILLAGER_SPAWN_EGG": "PILLAGER",
    "POLAR_BEAR_SPAWN_EGG": "POLAR_BEAR",
    "PUFFERFISH_SPAWN_EGG": "PUFFERFISH",
    "RABBIT_SPAWN_EGG": "RABBIT",
    "RAVAGER_SPAWN_EGG": "RAVAGER",
    "SALMON_SPAWN_EGG": "SALMON",
    "SHEEP_SPAWN_EGG": "SHEEP",
    "SHULKER_SPAWN_EGG": "SHULKER",
    "SILVERFISH_SPAWN_EGG": "SILVERFISH",
    "SKELETON_HORSE_SPAWN_EGG": "SKELETON_HORSE",
    "SKELETON_SPAWN_EGG": "SKELETON",
    "SLIME_SPAWN_EGG": "SLIME",
    "SPIDER_SPAWN_EGG": "SPIDER",
    "SQUID_SPAWN_EGG": "SQUID",
    "STRAY_SPAWN_EGG": "STRAY",
    "TRADER_LLAMA_SPAWN_EGG": "TRADER_LLAMA",
    "TROPICAL_FISH_SPAWN_EGG": "TROPICAL_FISH",
    "TURTLE_SPAWN_EGG": "TURTLE",
    "VEX_SPAWN_EGG": "VEX",
    "VILLAGER_SPAWN_EGG": "VILLAGER",
    "VINDICATOR_SPAWN_EGG": "VINDICATOR",
    "WANDERING_TRADER_SPAWN_EGG": "WANDERING_TRADER",
    "WITCH_SPAWN_EGG": "WITCH",
    "WITHER_SKELETON_SPAWN_EGG": "WITHER_SKELETON",
    "WOLF_SPAWN_EGG": "WOLF",
    "ZOMBIE_HORSE_SPAWN_EGG": "ZOMBIE_HORSE",
    "HOGLIN_SPAWN_EGG": "HOGLIN",
    "PIGLIN_SPAWN_EGG": "PIGLIN",
    "STRIDER_SPAWN_EGG": "STRIDER",
    "ZOGLIN_SPAWN_EGG": "ZOGLIN",
    "ZOMBIE_SPAWN_EGG": "ZOMBIE",
    "ZOMBIFIED_PIGLIN_SPAWN_EGG": "ZOMBIFIED_PIGLIN",
    "ZOMBIE_VILLAGER_SPAWN_EGG": "ZOMBIE_VILLAGER",
}

SPAWN_EGGS: Mapping[str, str] = MappingProxyType(_SPAWN_EGGS)
ENTITY_SPAWN_EGGS: Mapping[str, str] = MappingProxyType({entity: egg for egg, entity in _SPAWN_EGGS.items()})


def _normalize(identifier: object) -> Optional[str]:
    if not isinstance(identifier, str):
        return None
    return normalize_key(identifier)


def is_spawn_egg(material: Optional[str]) -> bool:
    """
    Tests if a material is that of a spawn egg

    Args:
        material: Material identifier, e.g. "BAT_SPAWN_EGG" or "minecraft:bat_spawn_egg"

    Returns:
        True if the material is a spawn egg, False otherwise (including None)
    """
    key = _normalize(material)
    return key is not None and key in SPAWN_EGGS


def get_entity_type(material: Optional[str]) -> Optional[str]:
    """
    Gets the entity type spawned by a spawn egg

    Returns:
        The entity type, or None if the material is not a spawn egg
    """
    key = _normalize(material)
    if key is None:
        return None
    return SPAWN_EGGS.get(key)


def get_spawn_egg(entity_type: Optional[str]) -> Optional[str]:
    """
    Gets the spawn egg material for an entity type

    Returns:
        The spawn egg material, or None if the entity has no spawn egg
    """
    key = _normalize(entity_type)
    if key is None:
        return None
    return ENTITY_SPAWN_EGGS.get(key)
