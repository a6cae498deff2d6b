"""Tests for sarifgen.sarif.rules: descriptor list construction and rule index lookup."""

import logging

from sarifgen.descriptions import RuleDescription, RuleDescriptionCatalog
from sarifgen.sarif.rules import RULE_NOT_FOUND, RuleRegistry, make_descriptor


def _catalog() -> RuleDescriptionCatalog:
    return RuleDescriptionCatalog.from_dict(
        {
            "WrongOrder": {"shortDescription": "order", "fullDescription": "calls out of order"},
            "WeakCipher": {"shortDescription": {"text": "cipher"}},
            "Empty": {},
        }
    )


def test_one_descriptor_per_catalog_entry_in_order():
    registry = RuleRegistry.from_catalog(_catalog())
    assert len(registry) == 3
    assert [d.id for d in registry.descriptors] == ["WrongOrder", "WeakCipher", "Empty"]


def test_missing_text_becomes_empty_string():
    registry = RuleRegistry.from_catalog(_catalog())
    empty = registry.descriptor("Empty")
    assert empty is not None
    assert empty.short_description.text == ""
    assert empty.full_description.text == ""
    cipher = registry.descriptor("WeakCipher")
    assert cipher.short_description.text == "cipher"
    assert cipher.full_description.text == ""


def test_deprecated_ids_present_and_empty():
    registry = RuleRegistry.from_catalog(_catalog())
    for descriptor in registry.descriptors:
        assert descriptor.deprecated_ids == []
        assert descriptor.deprecated_guids is None
        assert descriptor.deprecated_names is None


def test_index_of_matches_position():
    registry = RuleRegistry.from_catalog(_catalog())
    descriptors = registry.descriptors
    for rule_id in ("WrongOrder", "WeakCipher", "Empty"):
        index = registry.index_of(rule_id)
        assert descriptors[index].id == rule_id


def test_index_of_unknown_rule_logs_and_returns_sentinel(caplog):
    registry = RuleRegistry.from_catalog(_catalog())
    with caplog.at_level(logging.WARNING):
        assert registry.index_of("NotARule") == RULE_NOT_FOUND
    assert "NotARule" in caplog.text


def test_index_independent_of_description_text():
    """Changing a description after the registry is built does not affect lookup."""
    catalog = RuleDescriptionCatalog({"R1": RuleDescription(full_description="old")})
    registry = RuleRegistry.from_catalog(catalog)
    edited = RuleDescriptionCatalog({"R1": RuleDescription(full_description="new")})
    assert registry.index_of("R1") == 0
    assert edited.full_description("R1") == "new"


def test_duplicate_identifiers_keep_first():
    registry = RuleRegistry(
        [
            ("R1", RuleDescription(short_description="first")),
            ("R2", None),
            ("R1", RuleDescription(short_description="second")),
        ]
    )
    assert len(registry) == 2
    assert registry.index_of("R1") == 0
    assert registry.index_of("R2") == 1
    assert registry.descriptor("R1").short_description.text == "first"


def test_empty_catalog_gives_empty_rules():
    registry = RuleRegistry.from_catalog(RuleDescriptionCatalog())
    assert len(registry) == 0
    assert registry.descriptors == []


def test_descriptors_returns_copy():
    registry = RuleRegistry.from_catalog(_catalog())
    registry.descriptors.clear()
    assert len(registry.descriptors) == 3


def test_make_descriptor_without_description():
    descriptor = make_descriptor("R9", None)
    assert descriptor.id == "R9"
    assert descriptor.short_description.text == ""
    assert descriptor.full_description.text == ""
