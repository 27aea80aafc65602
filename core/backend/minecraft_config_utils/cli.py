"""
Command-Line Interface

Entry point for the minecraft-config-utils CLI tool.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .config_loader import ConfigError, load_config
from .config_parsing import parse_areas, parse_item_map, parse_key_value_map, parse_potion_effects
from .config_section import ConfigurationSection
from .duration import TimeUnit, is_permanent, parse_duration, parse_duration_as_ticks
from .enchantments import EnchantmentNames
from .registries import Enchantment, WorldRegistry
from .spawn_eggs import get_entity_type, get_spawn_egg

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, log_file: Optional[Path] = None):
    """Configure logging for CLI"""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def run_duration(text: str, unit_name: str) -> int:
    """
    Print a parsed duration

    Returns:
        Exit code (0 = success)
    """
    unit = TimeUnit[unit_name.upper()]
    millis = parse_duration(text)
    value = parse_duration(text, unit)
    if is_permanent(millis):
        logger.info(f"{text!r} = {value} {unit.name.lower()} (permanent)")
    else:
        logger.info(f"{text!r} = {value} {unit.name.lower()}")
    return 0


def run_ticks(text: str) -> int:
    logger.info(f"{text!r} = {parse_duration_as_ticks(text)} ticks")
    return 0


def run_enchantment(slug: str, csv_path: Optional[Path] = None) -> int:
    """
    Print the display name of an enchantment

    Returns:
        Exit code (0 = found, 1 = unknown enchantment or no name)
    """
    enchantment = Enchantment.get_by_name(slug)
    if enchantment is None:
        logger.error(f"✗ Unknown enchantment: {slug}")
        return 1

    names = EnchantmentNames()
    names.load(csv_path)
    name = names.get_name(enchantment)
    if name is None:
        logger.error(f"✗ No name set for enchantment {enchantment.name}")
        return 1

    initials = names.get_initials(enchantment)
    if initials:
        logger.info(f"{enchantment.name}: {name} ({initials})")
    else:
        logger.info(f"{enchantment.name}: {name}")
    return 0


def run_spawn_egg_lookup(entity_type: Optional[str] = None, material: Optional[str] = None) -> int:
    """
    Print the spawn egg of an entity type, or the entity type of a spawn egg

    Returns:
        Exit code (0 = found, 1 = no match)
    """
    if entity_type:
        egg = get_spawn_egg(entity_type)
        if egg is None:
            logger.error(f"✗ No spawn egg for entity type {entity_type}")
            return 1
        logger.info(f"{entity_type} → {egg}")
        return 0

    entity = get_entity_type(material)
    if entity is None:
        logger.error(f"✗ {material} is not a spawn egg")
        return 1
    logger.info(f"{material} → {entity}")
    return 0


def check_config(config: ConfigurationSection) -> List[str]:
    """
    Parse every known section of a config file

    Reads the "worlds" list, the "areas", "potion_effects" and "items"
    sections and the "enchantment_names" key-value map.

    Returns:
        All diagnostics produced while parsing
    """
    diagnostics: List[str] = []
    worlds = WorldRegistry.from_names(config.get_string_list("worlds"))
    logger.info(f"Worlds: {', '.join(worlds.names()) or 'none'}")

    areas = parse_areas(config.get_section("areas"), worlds)
    diagnostics.extend(areas.diagnostics)
    logger.info(f"✓ Parsed {len(areas.value)} area(s)")
    for name, area in areas.value.items():
        logger.info(f"  • {name}: {area.area_type.value} in {area.world.name}")

    effects = parse_potion_effects(config.get_section("potion_effects"))
    diagnostics.extend(effects.diagnostics)
    logger.info(f"✓ Parsed {len(effects.value)} potion effect(s)")
    for effect in effects.value:
        logger.info(f"  • {effect.effect_type} {effect.amplifier} for {effect.duration} ticks")

    items = parse_item_map(config.get_section("items"))
    diagnostics.extend(items.diagnostics)
    logger.info(f"✓ Parsed {len(items.value)} item stack(s), {items.value.total_item_amount()} item(s) total")

    names = {}
    mapping = parse_key_value_map(config, "enchantment_names", Enchantment.from_name, str, names)
    diagnostics.extend(mapping.diagnostics)
    logger.info(f"✓ Parsed {len(names)} enchantment name override(s)")

    return diagnostics


def run_check_config(config_path: Path) -> int:
    """
    Load and check a config file

    Returns:
        Exit code (0 = no problems, 1 = problems found or file unusable)
    """
    logger.info("Minecraft Config Utils - Config Check")
    logger.info("=" * 70)

    try:
        config = load_config(config_path)
    except ConfigError as e:
        logger.error(f"✗ {e}")
        return 1

    diagnostics = check_config(config)
    if diagnostics:
        logger.error(f"\n✗ Found {len(diagnostics)} problem(s):")
        for diagnostic in diagnostics:
            logger.error(f"  - {diagnostic}")
        return 1

    logger.info("\n✓ Config is valid!")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(
        description=f"Minecraft Config Utils v{__version__} - Config parsing helpers for Minecraft plugins",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Convert a duration to milliseconds or another unit
  %(prog)s --duration 3h5m43s
  %(prog)s --duration "2 weeks" --unit days

  # Convert a duration to server ticks
  %(prog)s --ticks 30s

  # Look up enchantment names and spawn eggs
  %(prog)s --enchantment DIG_SPEED
  %(prog)s --spawn-egg ZOMBIE
  %(prog)s --entity minecraft:bat_spawn_egg

  # Check a plugin config file
  %(prog)s --check-config config.yaml
        """
    )

    parser.add_argument("--duration", metavar="TEXT", help="Parse a human readable duration")
    parser.add_argument("--unit", default="milliseconds", choices=[unit.name.lower() for unit in TimeUnit],
                        help="Unit to print --duration in (default: milliseconds)")
    parser.add_argument("--ticks", metavar="TEXT", help="Parse a duration and print it in server ticks")
    parser.add_argument("--enchantment", metavar="SLUG", help="Show the display name of an enchantment")
    parser.add_argument("--enchantments-file", type=Path, help="CSV file to load enchantment names from")
    parser.add_argument("--spawn-egg", metavar="ENTITY", help="Show the spawn egg of an entity type")
    parser.add_argument("--entity", metavar="MATERIAL", help="Show the entity type spawned by a spawn egg")
    parser.add_argument("--check-config", type=Path, metavar="PATH", help="Parse and check a YAML config file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", type=Path, help="Also write log output to this file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    args = parser.parse_args(argv)
    setup_logging(verbose=args.verbose, log_file=args.log_file)

    try:
        if args.duration is not None:
            return run_duration(args.duration, args.unit)

        if args.ticks is not None:
            return run_ticks(args.ticks)

        if args.enchantment:
            return run_enchantment(args.enchantment, args.enchantments_file)

        if args.spawn_egg or args.entity:
            return run_spawn_egg_lookup(entity_type=args.spawn_egg, material=args.entity)

        if args.check_config:
            return run_check_config(args.check_config)

        parser.print_help()
        return 1

    except KeyboardInterrupt:
        logger.info("\n\nInterrupted by user")
        return 130
    except Exception as e:
        logger.exception(f"Unexpected error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
