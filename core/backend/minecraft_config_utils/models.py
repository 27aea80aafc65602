"""
Data Models

Typed results produced by the config parsers: worlds and locations,
area descriptors, potion effects, item stacks and item maps.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Generic, Iterator, List, Optional, Tuple, TypeVar, Union

from .config import DEFAULT_LOWER_Y_BOUND, DEFAULT_UPPER_Y_BOUND

T = TypeVar("T")


@dataclass(frozen=True)
class World:
    """Handle for a loaded world, identified by its name"""
    name: str


@dataclass(frozen=True)
class Location:
    """Block position inside a world"""
    world: World
    x: int = 0
    y: int = 0
    z: int = 0


class AreaType(Enum):
    """Shapes an area can be declared as in config"""
    GLOBAL = "GLOBAL"
    ELLIPSE = "ELLIPSE"
    RECTANGLE = "RECTANGLE"


@dataclass(frozen=True)
class GlobalYLimitedArea:
    """A whole world, limited only vertically"""
    world: World
    lower_y_bound: int = DEFAULT_LOWER_Y_BOUND
    upper_y_bound: int = DEFAULT_UPPER_Y_BOUND
    area_type: AreaType = field(default=AreaType.GLOBAL, init=False)


@dataclass(frozen=True)
class EllipseArea:
    """Ellipse around a center, x_size and z_size are the radii"""
    center: Location
    x_size: int
    z_size: int
    lower_y_bound: int = DEFAULT_LOWER_Y_BOUND
    upper_y_bound: int = DEFAULT_UPPER_Y_BOUND
    area_type: AreaType = field(default=AreaType.ELLIPSE, init=False)

    @property
    def world(self) -> World:
        return self.center.world


@dataclass(frozen=True)
class RectangleArea:
    """Axis aligned rectangle around a center, sizes are half extents"""
    center: Location
    x_size: int
    z_size: int
    lower_y_bound: int = DEFAULT_LOWER_Y_BOUND
    upper_y_bound: int = DEFAULT_UPPER_Y_BOUND
    area_type: AreaType = field(default=AreaType.RECTANGLE, init=False)

    @property
    def world(self) -> World:
        return self.center.world


Area = Union[GlobalYLimitedArea, EllipseArea, RectangleArea]


@dataclass(frozen=True)
class PotionEffect:
    """Potion effect with its duration in ticks"""
    effect_type: str
    duration: int
    amplifier: int


@dataclass(frozen=True)
class ItemStack:
    """A stack of items of one material"""
    material: str
    amount: int = 1
    display_name: Optional[str] = None
    lore: Tuple[str, ...] = ()

    def similar_key(self) -> Tuple[str, Optional[str], Tuple[str, ...]]:
        """Identity of the stack ignoring its amount"""
        return (self.material, self.display_name, self.lore)

    def with_amount(self, amount: int) -> "ItemStack":
        return ItemStack(self.material, amount, self.display_name, self.lore)


class ItemMap:
    """
    Collection of item stacks that aggregates quantities

    Adding a stack similar to one already present (same material, name
    and lore) increases the stored amount instead of adding a new entry.
    """

    def __init__(self, stacks: Optional[List[ItemStack]] = None):
        self._items: Dict[Tuple, ItemStack] = {}
        for stack in stacks or []:
            self.add_item_stack(stack)

    def add_item_stack(self, stack: ItemStack):
        key = stack.similar_key()
        existing = self._items.get(key)
        if existing is None:
            self._items[key] = stack
        else:
            self._items[key] = existing.with_amount(existing.amount + stack.amount)

    def get_amount(self, material: str) -> int:
        """Total amount of a material across all of its variants"""
        return sum(stack.amount for stack in self._items.values() if stack.material == material)

    def get_stacks(self) -> List[ItemStack]:
        return list(self._items.values())

    def total_item_amount(self) -> int:
        return sum(stack.amount for stack in self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ItemStack]:
        return iter(self._items.values())

    def __repr__(self) -> str:
        return f"ItemMap({self.get_stacks()!r})"


@dataclass
class ParseResult(Generic[T]):
    """
    Outcome of a config parse

    Carries the built value (None when construction was aborted) together
    with every diagnostic collected on the way, so callers can inspect
    problems without capturing log output.
    """
    value: Optional[T] = None
    diagnostics: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.value is not None and not self.diagnostics
