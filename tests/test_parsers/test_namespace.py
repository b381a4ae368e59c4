from pathlib import Path

import pytest

from simpleargparse.parser import Namespace, Option, OptionType


def test_namespace_seeds_defaults():
    namespace = Namespace(
        [
            Option("--name"),
            Option("--count", type=int),
            Option("--ratio", type=float),
            Option("--verbose", takes_value=False),
            Option("--quiet", takes_value=False, default=True),
            Option("--out", type=OptionType.FILE),
            Option("--tag", repeatable=True),
            Option("--level", default="info"),
        ]
    )
    assert namespace["name"] == ""
    assert namespace["count"] == 0
    assert namespace["ratio"] == 0.0
    assert namespace["verbose"] is False
    assert namespace["quiet"] is True
    assert namespace["out"] == Path(".")
    assert namespace["tag"] == []
    assert namespace["level"] == "info"
    assert namespace.help_requested is False
    assert namespace.consumed_indices == frozenset()


def test_integer_accessors_reinterpret_string_form():
    namespace = Namespace([Option("--int2")])
    namespace.set_value("int2", "2")
    assert namespace.get_string("int2") == "2"
    assert namespace.get_byte("int2") == 2
    assert namespace.get_short("int2") == 2
    assert namespace.get_int("int2") == 2
    assert namespace.get_long("int2") == 2


def test_float_accessors():
    namespace = Namespace([Option("--float3")])
    namespace.set_value("float3", "3.1415")
    assert namespace.get_float("float3") == pytest.approx(3.1415, rel=1e-6)
    assert namespace.get_double("float3") == 3.1415


def test_accessor_out_of_range_raises():
    namespace = Namespace([Option("--big", type=int)])
    namespace.set_value("big", 300)
    assert namespace.get_short("big") == 300
    with pytest.raises(ValueError):
        namespace.get_byte("big")


def test_accessor_wrong_literal_raises():
    namespace = Namespace([Option("--ratio", type=float)])
    namespace.set_value("ratio", 2.5)
    with pytest.raises(ValueError):
        namespace.get_int("ratio")


def test_get_boolean():
    namespace = Namespace([Option("--flag", takes_value=False), Option("--text")])
    namespace.set_value("flag", True)
    namespace.set_value("text", "TRUE")
    assert namespace.get_boolean("flag") is True
    assert namespace.get_boolean("text") is True


def test_get_file():
    namespace = Namespace([Option("--out", type="file"), Option("--name")])
    namespace.set_value("name", "report.txt")
    assert namespace.get_file("out") == Path(".")
    assert namespace.get_file("name") == Path("report.txt")
    namespace.set_value("out", None)
    assert namespace.get_file("out") is None
    assert namespace.get_file("unknown") is None


def test_get_list_and_add_value():
    namespace = Namespace([Option("--tag", repeatable=True), Option("--name")])
    namespace.add_value("tag", "a")
    namespace.add_value("tag", "b")
    assert namespace.get_list("tag") == ["a", "b"]
    with pytest.raises(TypeError):
        namespace.get_list("name")
    with pytest.raises(TypeError):
        namespace.add_value("name", "x")


def test_unknown_name_raises_key_error():
    namespace = Namespace([Option("--name")])
    with pytest.raises(KeyError):
        namespace.get_string("missing")
    with pytest.raises(KeyError):
        namespace["missing"]


def test_flip_default():
    namespace = Namespace(
        [Option("--on", takes_value=False, default=True), Option("--off", takes_value=False)]
    )
    assert namespace.flip_default("on") is False
    assert namespace.flip_default("off") is True


def test_mapping_helpers():
    namespace = Namespace([Option("--a"), Option("--b", default="x")])
    assert "a" in namespace
    assert "c" not in namespace
    assert namespace.get("c", 5) == 5
    assert namespace.names() == ["a", "b"]
    assert namespace.to_dict() == {"a": "", "b": "x"}
    assert repr(namespace) == "Namespace({'a': '', 'b': 'x'})"
