"""
Config Parsing

Builds typed objects (areas, potion effects, item maps, key-value maps)
out of ConfigurationSections. Malformed entries are logged and skipped;
objects missing a required field are not built at all. Every message is
also collected in the returned ParseResult.
"""

import logging
from typing import Callable, Dict, List, MutableMapping, Optional, TypeVar

from .config import (
    DEFAULT_LOWER_Y_BOUND,
    DEFAULT_POTION_AMPLIFIER,
    DEFAULT_POTION_DURATION,
    DEFAULT_UPPER_Y_BOUND,
    MISSING_SIZE,
)
from .config_section import ConfigurationSection
from .models import (
    Area,
    AreaType,
    EllipseArea,
    GlobalYLimitedArea,
    ItemMap,
    Location,
    ParseResult,
    PotionEffect,
    RectangleArea,
)
from .registries import PotionEffectType, WorldRegistry

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")


def _report(result: ParseResult, message: str, level: int = logging.WARNING):
    logger.log(level, message)
    result.diagnostics.append(message)


def _location_text(section: ConfigurationSection) -> str:
    return section.current_path or "<root>"


def parse_item_map(config: Optional[ConfigurationSection]) -> ParseResult[ItemMap]:
    """
    Creates an item map containing all the items listed in the given section

    Every child holding a nested section is read as one item stack, other
    children are ignored. Stacks of the same item are merged.

    Args:
        config: Section to parse the items from, may be None

    Returns:
        ParseResult holding the item map (empty if config is None)
    """
    result = ParseResult(value=ItemMap())
    if config is None:
        return result
    for key in config.get_keys():
        if not config.is_section(key):
            continue
        item = config.get_item_stack(key)
        if item is None:
            _report(result, f"Ignoring invalid item {key} at {_location_text(config)}")
            continue
        result.value.add_item_stack(item)
    return result


def parse_potion_effects(config: Optional[ConfigurationSection]) -> ParseResult[List[PotionEffect]]:
    """
    Parses a list of potion effects

    Each child of config is one effect::

        speed_boost:
          type: SPEED
          duration: 600   # ticks, default 200
          amplifier: 1    # default 0

    Entries without a valid type are skipped.

    Args:
        config: Section to parse the effects from, may be None

    Returns:
        ParseResult holding the parsed effects
    """
    result: ParseResult[List[PotionEffect]] = ParseResult(value=[])
    if config is None:
        return result
    for name in config.get_keys():
        effect_config = config.get_section(name)
        if effect_config is None:
            _report(result, f"Expected potion effect section at {_location_text(config)}, but {name} is no section",
                    logging.ERROR)
            continue
        type_name = effect_config.get_string("type")
        if type_name is None:
            _report(result, "Expected potion type to be specified, but found no \"type\" option at "
                    f"{effect_config.current_path}", logging.ERROR)
            continue
        effect_type = PotionEffectType.get_by_name(type_name)
        if effect_type is None:
            _report(result, f"Expected potion type to be specified at {effect_config.current_path} but found "
                    f"{type_name} which is no valid type", logging.ERROR)
            continue
        duration = effect_config.get_int("duration", DEFAULT_POTION_DURATION)
        amplifier = effect_config.get_int("amplifier", DEFAULT_POTION_AMPLIFIER)
        result.value.append(PotionEffect(effect_type.name, duration, amplifier))
    return result


def _read_size(config: ConfigurationSection, key: str, result: ParseResult) -> Optional[int]:
    size = config.get_int(key, MISSING_SIZE)
    if size == MISSING_SIZE:
        _report(result, f"Found no {key} for area at {_location_text(config)}")
        return None
    if size < 0:
        _report(result, f"Invalid {key} {size} for area at {_location_text(config)}, must not be negative")
        return None
    return size


def parse_area(config: Optional[ConfigurationSection], worlds: WorldRegistry) -> ParseResult[Area]:
    """
    Parses an area description

    Layout::

        type: RECTANGLE     # GLOBAL, ELLIPSE or RECTANGLE
        world: world
        lowerYBound: 0      # default 0
        upperYBound: 255    # default 255
        center:             # ELLIPSE and RECTANGLE only
          x: 100
          y: 64
          z: -20
        xSize: 50           # ELLIPSE and RECTANGLE only
        zSize: 50

    Args:
        config: Section describing the area, may be None
        worlds: Registry the world name is resolved against

    Returns:
        ParseResult holding the area, or no value if anything required
        was missing or invalid
    """
    result: ParseResult[Area] = ParseResult()
    if config is None:
        _report(result, "Tried to parse area on null section")
        return result
    type_name = config.get_string("type")
    if type_name is None:
        _report(result, f"Found no area type at {_location_text(config)}")
        return result
    lower_y_bound = config.get_int("lowerYBound", DEFAULT_LOWER_Y_BOUND)
    upper_y_bound = config.get_int("upperYBound", DEFAULT_UPPER_Y_BOUND)
    world_name = config.get_string("world")
    if world_name is None:
        _report(result, f"Found no world specified for area at {_location_text(config)}")
        return result
    world = worlds.get_world(world_name)
    if world is None:
        _report(result, f"Found no world with name {world_name} as specified at {_location_text(config)}")
        return result

    try:
        area_type = AreaType(type_name.upper())
    except ValueError:
        _report(result, f"Invalid area type {type_name} at {_location_text(config)}")
        return result

    if area_type is AreaType.GLOBAL:
        result.value = GlobalYLimitedArea(world, lower_y_bound, upper_y_bound)
        return result

    center_config = config.get_section("center")
    if center_config is None:
        _report(result, f"Found no center for area at {_location_text(config)}")
        return result
    center = Location(
        world,
        center_config.get_int("x", 0),
        center_config.get_int("y", 0),
        center_config.get_int("z", 0),
    )
    x_size = _read_size(config, "xSize", result)
    if x_size is None:
        return result
    z_size = _read_size(config, "zSize", result)
    if z_size is None:
        return result

    area_class = EllipseArea if area_type is AreaType.ELLIPSE else RectangleArea
    result.value = area_class(center, x_size, z_size, lower_y_bound, upper_y_bound)
    return result


def parse_key_value_map(parent: ConfigurationSection, identifier: str,
                        key_converter: Callable[[str], K], value_converter: Callable[[str], V],
                        map_to_use: MutableMapping[K, V]) -> ParseResult[MutableMapping[K, V]]:
    """
    Parses a section which contains key-value mappings of a type to another type

    Args:
        parent: Section containing the section with the values
        identifier: Key of the section containing the entries
        key_converter: Converts key strings to K, may raise ValueError
        value_converter: Converts value strings to V
        map_to_use: Mapping the parsed keys and values are placed in

    Returns:
        ParseResult holding map_to_use
    """
    result: ParseResult[MutableMapping[K, V]] = ParseResult(value=map_to_use)
    section = parent.get_section(identifier)
    if section is None:
        return result
    for key_string in section.get_keys():
        if not section.is_string(key_string):
            _report(result, f"Ignoring invalid {identifier} entry {key_string} at {section.current_path}")
            continue
        try:
            key_instance = key_converter(key_string)
        except ValueError as e:
            _report(result, f"Failed to parse {identifier} {key_string} at {section.current_path}: {e}")
            continue
        map_to_use[key_instance] = value_converter(section.get_string(key_string))
    return result


def parse_areas(config: Optional[ConfigurationSection], worlds: WorldRegistry) -> ParseResult[Dict[str, Area]]:
    """
    Parses every child section of config as an area

    Areas that fail to parse are left out, their diagnostics are kept.

    Returns:
        ParseResult holding {area name: area}
    """
    result: ParseResult[Dict[str, Area]] = ParseResult(value={})
    if config is None:
        return result
    for name in config.get_keys():
        area_result = parse_area(config.get_section(name), worlds)
        result.diagnostics.extend(area_result.diagnostics)
        if area_result.value is not None:
            result.value[name] = area_result.value
    return result
