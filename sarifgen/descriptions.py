from __future__ import annotations

"""
Rule-description catalog: human-readable text for every rule the analysis can report.

The catalog maps a rule identifier to its short, full, pass and fail
descriptions. Any of them may be missing; callers substitute the empty string.
It is usually loaded from a JSON file shaped like

    {
      "WrongOrder": {
        "shortDescription": {"text": "Calls out of order"},
        "fullDescription": "The calls were made in an order the rule forbids.",
        "passDescription": {"text": "Calls were made in the allowed order."}
      }
    }

where each description is either a plain string or a SARIF-style {"text": ...}
object.
"""

import logging
from pathlib import Path
from typing import Any, Iterator, Mapping, Optional

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError, field_validator
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when a rule-description catalog cannot be read or validated."""


class RuleDescription(BaseModel):
    """Descriptive text for one rule. Missing text stays None."""

    short_description: Optional[str] = None
    full_description: Optional[str] = None
    pass_description: Optional[str] = None
    fail_description: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    @field_validator(
        "short_description",
        "full_description",
        "pass_description",
        "fail_description",
        mode="before",
    )
    @classmethod
    def _unwrap_text(cls, value: Any) -> Any:
        # Accept {"text": "..."} as written in SARIF-style description files.
        if isinstance(value, dict):
            return value.get("text")
        return value


_CATALOG_ADAPTER = TypeAdapter(dict[str, Optional[RuleDescription]])


class RuleDescriptionCatalog:
    """
    Read-only mapping of rule identifier -> RuleDescription.

    Iteration order is insertion order, which fixes the order of the rules
    written to each run.
    """

    def __init__(self, items: Optional[Mapping[str, RuleDescription]] = None) -> None:
        self._items: dict[str, RuleDescription] = dict(items or {})

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RuleDescriptionCatalog:
        """Build a catalog from plain JSON-like data; raises CatalogError on bad entries."""
        try:
            entries = _CATALOG_ADAPTER.validate_python(data)
        except ValidationError as exc:
            raise CatalogError(f"Invalid rule descriptions: {exc}") from exc
        return cls._from_entries(entries)

    @classmethod
    def from_json(cls, raw: bytes) -> RuleDescriptionCatalog:
        """Build a catalog from JSON bytes; raises CatalogError on malformed or invalid content."""
        try:
            entries = _CATALOG_ADAPTER.validate_json(raw)
        except ValidationError as exc:
            raise CatalogError(f"Invalid rule descriptions: {exc}") from exc
        return cls._from_entries(entries)

    @classmethod
    def _from_entries(cls, entries: dict[str, Optional[RuleDescription]]) -> RuleDescriptionCatalog:
        # A null entry describes a rule with no text at all
        return cls(
            {rule_id: entry if entry is not None else RuleDescription() for rule_id, entry in entries.items()}
        )

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._items

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def items(self) -> list[tuple[str, RuleDescription]]:
        return list(self._items.items())

    def get(self, rule_id: str) -> Optional[RuleDescription]:
        return self._items.get(rule_id)

    def short_description(self, rule_id: str) -> Optional[str]:
        entry = self._items.get(rule_id)
        return entry.short_description if entry else None

    def full_description(self, rule_id: str) -> Optional[str]:
        entry = self._items.get(rule_id)
        return entry.full_description if entry else None

    def pass_description(self, rule_id: str) -> Optional[str]:
        entry = self._items.get(rule_id)
        return entry.pass_description if entry else None

    def fail_description(self, rule_id: str) -> Optional[str]:
        entry = self._items.get(rule_id)
        return entry.fail_description if entry else None


def load_catalog(path: Path) -> RuleDescriptionCatalog:
    """
    Read a rule-description catalog from a JSON file.

    Raises:
        CatalogError: the file is unreadable, is not a JSON object, or holds
            an entry that does not validate. The cause is logged first.
    """
    try:
        raw = path.read_bytes()
    except OSError as e:
        logger.error("Failed to read rule descriptions %s: %s", path, e)
        raise CatalogError(f"Cannot read rule descriptions from {path}: {e}") from e

    try:
        catalog = RuleDescriptionCatalog.from_json(raw)
    except CatalogError as e:
        logger.error("Invalid rule descriptions in %s: %s", path, e)
        raise

    logger.info("Loaded %d rule description(s) from %s", len(catalog), path)
    return catalog
