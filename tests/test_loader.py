"""
Tests for loading custom OID mapping files.
"""
from pathlib import Path
from typing import Callable

import pytest
from pytest_mock import MockerFixture

from certoids.errors import OidRegistrationError, ParseError, RegistrationError
from certoids.loader import load_custom_oid_file
from certoids.registry import OidDefinition, OidRegistry
from certoids.subtree import subtree_of

WriteMapping = Callable[..., Path]

VALID_MAPPING = """\
---
oid_mapping:
  '1.3.6.1.4.1.34380.1.2.1.1':
    shortname: 'myshortname'
    longname: 'Long name'
  '1.3.6.1.4.1.34380.1.2.1.2':
    shortname: 'myothershortname'
    longname: 'Other Long name'
"""


def test_load_registers_custom_oids(registry: OidRegistry, write_mapping: WriteMapping) -> None:
    path = write_mapping(VALID_MAPPING)
    loaded = load_custom_oid_file(str(path), registry=registry)
    assert loaded == [
        OidDefinition("1.3.6.1.4.1.34380.1.2.1.1", "myshortname", "Long name"),
        OidDefinition("1.3.6.1.4.1.34380.1.2.1.2", "myothershortname", "Other Long name"),
    ]
    assert registry.canonical("myshortname") == "1.3.6.1.4.1.34380.1.2.1.1"
    assert registry.canonical("Other Long name") == "1.3.6.1.4.1.34380.1.2.1.2"
    assert subtree_of("ppPrivCertExt", "myothershortname", registry=registry)


def test_load_with_custom_map_key(registry: OidRegistry, write_mapping: WriteMapping) -> None:
    path = write_mapping(VALID_MAPPING.replace("oid_mapping:", "custom_oids:"))
    load_custom_oid_file(path, "custom_oids", registry=registry)
    assert registry.canonical("myshortname") == "1.3.6.1.4.1.34380.1.2.1.1"


def test_load_same_file_twice(registry: OidRegistry, write_mapping: WriteMapping) -> None:
    path = write_mapping(VALID_MAPPING)
    load_custom_oid_file(str(path), registry=registry)
    count = len(registry)
    load_custom_oid_file(str(path), registry=registry)
    assert len(registry) == count
    assert registry.canonical("myshortname") == "1.3.6.1.4.1.34380.1.2.1.1"
    assert registry.canonical("pp_uuid") == "1.3.6.1.4.1.34380.1.1.1"


def test_missing_file_is_skipped(registry: OidRegistry, tmp_path: Path) -> None:
    count = len(registry)
    assert load_custom_oid_file(str(tmp_path / "missing.yaml"), registry=registry) == []
    assert len(registry) == count


def test_directory_is_skipped(registry: OidRegistry, tmp_path: Path) -> None:
    assert load_custom_oid_file(str(tmp_path), registry=registry) == []


def test_unreadable_file_is_skipped(
    registry: OidRegistry, write_mapping: WriteMapping, mocker: MockerFixture
) -> None:
    path = write_mapping(VALID_MAPPING)
    mocker.patch("certoids.loader.os.access", return_value=False)
    count = len(registry)
    assert load_custom_oid_file(str(path), registry=registry) == []
    assert len(registry) == count


def test_invalid_yaml_raises_parse_error(registry: OidRegistry, write_mapping: WriteMapping) -> None:
    path = write_mapping("oid_mapping: [unclosed\n  - {")
    with pytest.raises(ParseError) as exc_info:
        load_custom_oid_file(str(path), registry=registry)
    assert str(path) in str(exc_info.value)
    assert exc_info.value.path == str(path)
    assert exc_info.value.__cause__ is not None


@pytest.mark.parametrize("text", [
    "other_key:\n  '1.2.3': {shortname: a, longname: b}\n",
    "",
    "- just\n- a list\n",
])
def test_missing_map_key_raises_parse_error(registry: OidRegistry, write_mapping: WriteMapping, text: str) -> None:
    path = write_mapping(text)
    with pytest.raises(ParseError, match="no such index 'oid_mapping'"):
        load_custom_oid_file(str(path), registry=registry)


@pytest.mark.parametrize("text", [
    "oid_mapping:\n  - '1.3.6.1.4.1.34380.1.2.1.1'\n",
    "oid_mapping: 42\n",
    "oid_mapping: some string\n",
])
def test_non_mapping_value_raises_parse_error(registry: OidRegistry, write_mapping: WriteMapping, text: str) -> None:
    path = write_mapping(text)
    with pytest.raises(ParseError, match="must be a Hash"):
        load_custom_oid_file(str(path), registry=registry)


@pytest.mark.parametrize("entry", [
    "{longname: 'Missing short'}",
    "{shortname: 'missinglong'}",
    "{shortname: '', longname: 'Empty short'}",
    "just a string",
    "null",
])
def test_incomplete_entry_registers_nothing(registry: OidRegistry, write_mapping: WriteMapping, entry: str) -> None:
    path = write_mapping(
        "oid_mapping:\n"
        "  '1.3.6.1.4.1.34380.1.2.1.1': {shortname: 'goodname', longname: 'Good name'}\n"
        f"  '1.3.6.1.4.1.34380.1.2.1.2': {entry}\n"
    )
    count = len(registry)
    with pytest.raises(ParseError, match="incomplete definition of oid '1.3.6.1.4.1.34380.1.2.1.2'") as exc_info:
        load_custom_oid_file(str(path), registry=registry)
    assert exc_info.value.oid == "1.3.6.1.4.1.34380.1.2.1.2"
    assert len(registry) == count
    assert "goodname" not in registry


def test_registration_failure_raises_registration_error(
    registry: OidRegistry, write_mapping: WriteMapping
) -> None:
    path = write_mapping(
        "oid_mapping:\n"
        "  '1.3.6.1.4.1.34380.1.2.1.1': {shortname: 'first', longname: 'First'}\n"
        "  '1.3.6.1.4.1.34380.1.2.1.2': {shortname: 'pp_uuid', longname: 'Clashes with builtin'}\n"
        "  '1.3.6.1.4.1.34380.1.2.1.3': {shortname: 'third', longname: 'Third'}\n"
    )
    with pytest.raises(RegistrationError) as exc_info:
        load_custom_oid_file(str(path), registry=registry)
    assert isinstance(exc_info.value, ValueError)
    assert isinstance(exc_info.value.__cause__, OidRegistrationError)
    assert str(path) in str(exc_info.value)
    # No rollback of entries committed before the failure
    assert registry.canonical("first") == "1.3.6.1.4.1.34380.1.2.1.1"
    assert "third" not in registry
    assert registry.canonical("pp_uuid") == "1.3.6.1.4.1.34380.1.1.1"


def test_malformed_oid_raises_registration_error(registry: OidRegistry, write_mapping: WriteMapping) -> None:
    path = write_mapping("oid_mapping:\n  'not.an.oid': {shortname: 'bad', longname: 'Bad'}\n")
    with pytest.raises(RegistrationError):
        load_custom_oid_file(str(path), registry=registry)
    assert "bad" not in registry


def test_accepts_path_objects(registry: OidRegistry, write_mapping: WriteMapping) -> None:
    path = write_mapping(VALID_MAPPING)
    assert len(load_custom_oid_file(path, registry=registry)) == 2  # type: ignore[arg-type]


def test_load_logs_result(registry: OidRegistry, write_mapping: WriteMapping, mocker: MockerFixture) -> None:
    info = mocker.patch("certoids.loader.logger.info")
    load_custom_oid_file(str(write_mapping(VALID_MAPPING)), registry=registry)
    info.assert_called_once()
    assert "Loaded 2 custom OIDs" in info.call_args[0][0]
    assert "custom_oids.yaml" in info.call_args[0][0]


@pytest.mark.parametrize("oid", [
    "1.3.6.1.4.1.34380.1.2..1",
    "1.3.6.1.4.1.34380.1.2.1.",
    ".1.3.6.1.4.1.34380.1.2.1",
])
def test_empty_arc_key_raises_registration_error(
    registry: OidRegistry, write_mapping: WriteMapping, oid: str
) -> None:
    path = write_mapping(f"oid_mapping:\n  '{oid}': {{shortname: 'emptyarc', longname: 'Empty arc'}}\n")
    with pytest.raises(RegistrationError) as exc_info:
        load_custom_oid_file(str(path), registry=registry)
    assert isinstance(exc_info.value.__cause__, OidRegistrationError)
    assert "emptyarc" not in registry


@pytest.mark.parametrize("entry", [
    "{shortname: 123, longname: 'Numeric short'}",
    "{shortname: 'numericlong', longname: 456}",
])
def test_non_string_name_reaches_registration(
    registry: OidRegistry, write_mapping: WriteMapping, entry: str
) -> None:
    path = write_mapping(f"oid_mapping:\n  '1.3.6.1.4.1.34380.1.2.1.1': {entry}\n")
    with pytest.raises(RegistrationError, match="must be a non-empty string"):
        load_custom_oid_file(str(path), registry=registry)
    assert registry.lookup("1.3.6.1.4.1.34380.1.2.1.1") is None
