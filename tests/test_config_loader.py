import pytest

from minecraft_config_utils.config_loader import ConfigError, load_config, load_config_text, substitute_env_vars


def test_load_config(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("worlds:\n  - world\narea:\n  type: GLOBAL\n  world: world\n")

    config = load_config(path)

    assert config.get_string_list("worlds") == ["world"]
    assert config.get_string("area.type") == "GLOBAL"
    assert config.current_path == ""


def test_missing_file_raises(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "nope.yaml")


def test_invalid_yaml_raises():
    with pytest.raises(ConfigError):
        load_config_text("key: [unclosed")


def test_top_level_must_be_mapping():
    with pytest.raises(ConfigError):
        load_config_text("- a\n- b\n")


def test_empty_document_gives_empty_section():
    assert load_config_text("").get_keys() == []


def test_env_substitution(monkeypatch):
    monkeypatch.setenv("SPAWN_WORLD", "lobby")
    monkeypatch.delenv("MISSING_VAR", raising=False)

    config = load_config_text(
        "world: ${SPAWN_WORLD}\n"
        "other: ${MISSING_VAR:-fallback}\n"
        "empty: x${MISSING_VAR}y\n"
        "list: ['${SPAWN_WORLD}', 3]\n"
    )

    assert config.get_string("world") == "lobby"
    assert config.get_string("other") == "fallback"
    assert config.get_string("empty") == "xy"
    assert config.get_string_list("list") == ["lobby", "3"]


def test_substitute_env_vars_leaves_other_values(monkeypatch):
    monkeypatch.setenv("NAME", "value")
    data = {"a": 1, "b": None, "c": {"d": "${NAME}"}}
    assert substitute_env_vars(data) == {"a": 1, "b": None, "c": {"d": "value"}}


def test_invalid_utf8_file_raises_config_error(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_bytes(b"world: w\xffrld\n")

    with pytest.raises(ConfigError):
        load_config(path)


def test_substitute_env_vars_nested_lists_and_non_string_keys(monkeypatch):
    monkeypatch.setenv("WORLD_NAME", "lobby")
    data = {
        1: "${WORLD_NAME}",
        None: ["a", ["${WORLD_NAME}", {"deep": "${WORLD_NAME:-x}"}], 2.5],
    }

    assert substitute_env_vars(data) == {
        1: "lobby",
        None: ["a", ["lobby", {"deep": "lobby"}], 2.5],
    }


def test_non_string_keys_survive_loading(monkeypatch):
    monkeypatch.setenv("WORLD_NAME", "lobby")

    config = load_config_text("1: ${WORLD_NAME}\nlevels:\n  - - ${WORLD_NAME}\n    - 2\n")

    assert config.get_string("1") == "lobby"
    assert config.get_keys() == ["1", "levels"]
