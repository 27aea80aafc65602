from minecraft_config_utils.config_section import ConfigurationSection
from minecraft_config_utils.models import ItemStack


def make_section():
    return ConfigurationSection({
        "name": "spawn",
        "count": 5,
        "ratio": 2.7,
        "numeric": "12",
        "flag": True,
        "center": {"x": 10, "y": 64, "z": -3},
        "tags": ["a", "b", 3],
        "item": {"type": "minecraft:diamond", "amount": 3, "name": "Shiny", "lore": ["first", "second"]},
        1: {"nested": "int key"},
    })


def test_get_keys_keeps_order():
    assert make_section().get_keys() == ["name", "count", "ratio", "numeric", "flag", "center", "tags", "item", "1"]


def test_get_string_converts_scalars():
    section = make_section()
    assert section.get_string("name") == "spawn"
    assert section.get_string("count") == "5"
    assert section.get_string("flag") == "true"
    assert section.get_string("center") is None
    assert section.get_string("missing", "fallback") == "fallback"


def test_get_int():
    section = make_section()
    assert section.get_int("count") == 5
    assert section.get_int("ratio") == 2
    assert section.get_int("numeric") == 12
    assert section.get_int("name", -1) == -1
    assert section.get_int("flag", 7) == 7
    assert section.get_int("missing", -1) == -1


def test_dotted_paths():
    section = make_section()
    assert section.get_int("center.x") == 10
    assert section.get_int("center.z") == -3
    assert section.contains("center.y")
    assert not section.contains("center.w")
    assert not section.contains("name.x")


def test_sections_track_their_path():
    section = make_section()
    center = section.get_section("center")
    assert center is not None
    assert center.current_path == "center"
    assert center.name == "center"
    assert section.get_section("name") is None
    assert section.is_section("center")
    assert not section.is_section("count")

    nested = ConfigurationSection({"a": {"b": {"c": 1}}}).get_section("a").get_section("b")
    assert nested.current_path == "a.b"
    assert nested.name == "b"


def test_non_string_keys_are_reachable():
    section = make_section()
    assert section.get_string("1.nested") == "int key"


def test_is_string():
    section = make_section()
    assert section.is_string("name")
    assert not section.is_string("count")
    assert not section.is_string("missing")


def test_string_list():
    section = make_section()
    assert section.get_string_list("tags") == ["a", "b", "3"]
    assert section.get_string_list("name") == []


def test_get_item_stack():
    item = make_section().get_item_stack("item")
    assert item == ItemStack("DIAMOND", 3, "Shiny", ("first", "second"))


def test_get_item_stack_defaults_and_failures():
    section = ConfigurationSection({
        "plain": {"type": "stone"},
        "no_type": {"amount": 2},
        "empty": {"type": "dirt", "amount": 0},
        "scalar": "stone",
    })
    assert section.get_item_stack("plain") == ItemStack("STONE", 1)
    assert section.get_item_stack("no_type") is None
    assert section.get_item_stack("empty") is None
    assert section.get_item_stack("scalar") is None
    assert section.get_item_stack("missing") is None


def test_contains_operator():
    section = make_section()
    assert "name" in section
    assert "missing" not in section
    assert 5 not in section


def test_get_int_ignores_non_finite_floats():
    section = ConfigurationSection({"inf": float("inf"), "ninf": float("-inf"), "nan": float("nan")})
    assert section.get_int("inf", -1) == -1
    assert section.get_int("ninf", 4) == 4
    assert section.get_int("nan") == 0
