import json

import pytest

from nix_config_parser import NixConfig, parse_string


def test_mapping_protocol():
    config = parse_string("cores = 4\nmax-jobs = auto\n")
    assert config["cores"] == "4"
    assert config.get("missing") is None
    assert "max-jobs" in config
    assert len(config) == 2
    assert list(config.keys()) == ["cores", "max-jobs"]
    with pytest.raises(KeyError):
        config["missing"]


def test_set_keeps_position():
    config = NixConfig()
    config.set("a", "1")
    config.set("b", "2")
    config.set("a", "3")
    assert list(config.items()) == [("a", "3"), ("b", "2")]


def test_update_appends_new_keys_in_their_order():
    config = NixConfig({"a": "1", "b": "2"})
    config.update(NixConfig({"c": "3", "a": "4"}))
    assert list(config.items()) == [("a", "4"), ("b", "2"), ("c", "3")]


def test_dict_round_trip():
    config = parse_string("substituters = https://a https://b\nkey =\n")
    data = config.to_dict()
    assert data == {"substituters": "https://a https://b", "key": ""}
    data["extra"] = "x"
    assert "extra" not in config
    assert NixConfig.from_dict(config.to_dict()) == config


def test_json_serialization():
    config = parse_string("b = 2\na = 1\n")
    text = config.to_json()
    assert json.loads(text) == {"b": "2", "a": "1"}
    restored = NixConfig.from_json(text)
    assert list(restored.items()) == [("b", "2"), ("a", "1")]


@pytest.mark.parametrize(
    "data, error",
    [
        ({"cores": 4}, TypeError),
        ({"": "x"}, ValueError),
        ({"two words": "x"}, ValueError),
    ],
)
def test_from_dict_rejects_invalid_settings(data, error):
    with pytest.raises(error):
        NixConfig.from_dict(data)


def test_from_json_requires_object():
    with pytest.raises(TypeError):
        NixConfig.from_json("[1, 2]")


def test_dump_renders_settings():
    config = parse_string("cores = 4\nextra-sandbox-paths =\n")
    assert config.dump() == "cores = 4\nextra-sandbox-paths ="


def test_from_dict_names_the_offending_part():
    with pytest.raises(TypeError, match="Setting name 1 must be a string, got int"):
        NixConfig.from_dict({1: "x"})
    with pytest.raises(
        TypeError, match="Value of setting 'cores' must be a string, got int"
    ):
        NixConfig.from_dict({"cores": 4})
