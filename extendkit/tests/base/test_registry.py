"""Capability registry: registration, validation, aliasing, logging."""

from __future__ import annotations

import pytest

from extendkit.base.errors import ErrorCode, ExtensionError
from extendkit.base.registry import CapabilityRegistry, binds_to_anchor
from extendkit.tests.utils import assert_true, log_lines


def _describe(this):
    return f"value {this}"


def test_register_and_lookup(registry):
    registry.register("Point", {"describe": _describe, "unit": "px"})
    found = registry.lookup("Point")
    assert found is not None  # nosec B101
    assert found["unit"] == "px"  # nosec B101
    assert registry.lookup("Missing") is None  # nosec B101
    assert "Point" in registry and len(registry) == 1  # nosec B101
    assert list(registry) == ["Point"]  # nosec B101


def test_registration_copies_the_set(registry):
    source = {"unit": "px"}
    registry.register("Point", source)
    source["unit"] = "em"
    source["extra"] = 1
    stored = registry.lookup("Point")
    assert stored["unit"] == "px" and "extra" not in stored  # nosec B101
    with pytest.raises(TypeError):
        stored["unit"] = "cm"  # type: ignore[index]


def test_last_registration_wins(registry):
    registry.register("Point", {"unit": "px"})
    registry.register("Point", {"unit": "em"})
    assert registry.lookup("Point")["unit"] == "em"  # nosec B101


@pytest.mark.parametrize(
    "type_name, capability_set",
    [
        ("", {}),
        (None, {}),
        ("Point", ["not", "a", "mapping"]),
        ("Point", {1: "numeric key"}),
        ("Point", {"": "empty key"}),
    ],
)
def test_invalid_registration_is_rejected(registry, type_name, capability_set):
    with pytest.raises(ExtensionError) as excinfo:
        registry.register(type_name, capability_set)
    assert excinfo.value.code is ErrorCode.VALIDATION  # nosec B101
    assert len(registry) == 0  # nosec B101


def test_alias_shares_the_stored_set(registry):
    registry.register("int", {"double": lambda this: this * 2})
    registry.register_alias("float", "int")
    assert registry.lookup("float") is registry.lookup("int")  # nosec B101


def test_alias_rejects_empty_name(registry):
    registry.register("int", {"double": lambda this: this * 2})
    with pytest.raises(ExtensionError) as excinfo:
        registry.register_alias("", "int")
    assert excinfo.value.code is ErrorCode.VALIDATION  # nosec B101


def test_alias_overwrite_logs_warning(capsys):
    registry = CapabilityRegistry()
    registry.register("int", {"double": lambda this: this * 2})
    registry.register("float", {"half": lambda this: this / 2})
    registry.register_alias("float", "int")
    events = [e for e in log_lines(capsys.readouterr().err) if e.get("event") == "registry.overwrite"]
    assert [e["operation"] for e in events] == ["register_alias"]  # nosec B101
    assert "half" not in registry.lookup("float")  # nosec B101


def test_alias_of_unknown_type_fails(registry):
    with pytest.raises(ExtensionError) as excinfo:
        registry.register_alias("float", "int")
    assert excinfo.value.code is ErrorCode.NOT_FOUND  # nosec B101
    assert excinfo.value.type_name == "int"  # nosec B101


def test_describe_splits_methods_and_fields(registry):
    registry.register(
        "Point",
        {
            "describe": _describe,
            "size": property(lambda this: 1),
            "unit": "px",
            "factory": dict,
        },
    )
    info = registry.describe("Point")
    assert info is not None  # nosec B101
    assert info.methods == ["describe", "size"]  # nosec B101
    assert info.fields == ["factory", "unit"]  # nosec B101
    assert info.names == ["describe", "factory", "size", "unit"]  # nosec B101
    assert registry.describe("Missing") is None  # nosec B101


def test_binds_to_anchor():
    assert binds_to_anchor(_describe)  # nosec B101
    assert binds_to_anchor(len)  # nosec B101
    assert binds_to_anchor(staticmethod(_describe))  # nosec B101
    assert not binds_to_anchor(dict)  # nosec B101
    assert not binds_to_anchor("px")  # nosec B101


def test_overwrite_logs_warning(capsys):
    registry = CapabilityRegistry()
    registry.register("Point", {"unit": "px"})
    registry.register("Point", {"unit": "em"})
    events = [e for e in log_lines(capsys.readouterr().err) if e.get("event") == "registry.overwrite"]
    assert_true(len(events) == 1, f"expected one overwrite warning, got {events}")
    assert events[0]["level"] == "WARNING"  # nosec B101
    assert events[0]["type_name"] == "Point"  # nosec B101
    assert events[0]["logger"] == "extendkit.registry"  # nosec B101


def test_overwrite_warning_can_be_disabled(capsys):
    registry = CapabilityRegistry(warn_on_overwrite=False)
    registry.register("Point", {"unit": "px"})
    registry.register("Point", {"unit": "em"})
    assert log_lines(capsys.readouterr().err) == []  # nosec B101
