import pytest
import yaml

from sentence_producers.config.loader import load_build_config, load_producer_config
from sentence_producers.config.params import ensure_no_extras, get_param, require_param
from sentence_producers.errors import ConfigurationError
from sentence_producers.producers import register_producer, unregister_producer


def _write(tmp_path, data, name="build.yaml"):
    path = tmp_path / name
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return str(path)


def test_load_build_config_validates_type_on_load(tmp_path):
    path = _write(tmp_path, {"sentence producer": {"sentence producer type": "sentence selektor"}})
    with pytest.raises(ConfigurationError, match="unrecognized"):
        load_build_config(path)


def test_load_build_config_validates_nested_producers(tmp_path):
    path = _write(tmp_path, {"sentence producer": {
        "sentence producer type": "sentence corruptor",
        "positive data": {"sentence producer type": "nope"},
    }})
    with pytest.raises(ConfigurationError):
        load_build_config(path)


def test_load_build_config_requires_section(tmp_path):
    with pytest.raises(ConfigurationError, match="sentence producer"):
        load_build_config(_write(tmp_path, {"run": {"run_id": "x"}}))


def test_load_build_config_ok(tmp_path):
    data = {
        "run": {"run_id": "r1"},
        "sentence producer": {"sentence producer type": "manually provided", "filename": "g.tsv"},
    }
    assert load_build_config(_write(tmp_path, data)) == data


def test_load_producer_config_accepts_dynamic_types(tmp_path):
    path = _write(tmp_path, {"sentence producer type": "custom kind"}, "producer.yaml")
    with pytest.raises(ConfigurationError):
        load_producer_config(path)
    register_producer("custom kind", lambda params, rng: None)
    try:
        assert load_producer_config(path) == {"sentence producer type": "custom kind"}
    finally:
        unregister_producer("custom kind")


def test_param_helpers():
    params = {"a": 1, "b": None, "c": True}
    assert require_param(params, "a", int) == 1
    assert get_param(params, "b", 5) == 5
    assert get_param(params, "missing", "d") == "d"
    assert get_param(params, "c", False, bool) is True
    with pytest.raises(ConfigurationError):
        require_param(params, "b")
    with pytest.raises(ConfigurationError):
        get_param(params, "c", 0, int)
    with pytest.raises(ConfigurationError, match="'z'"):
        ensure_no_extras({"a": 1, "z": 2}, ["a"])
