# Per-run rule registry: the deduplicated reportingDescriptor list and rule-id -> index lookup.

from __future__ import annotations

import logging
from typing import Iterable, Optional

from sarifgen.descriptions import RuleDescription, RuleDescriptionCatalog
from sarifgen.sarif.schema import MultiformatMessageString, ReportingDescriptor

logger = logging.getLogger(__name__)

RULE_NOT_FOUND = -1


def make_descriptor(rule_id: str, description: Optional[RuleDescription]) -> ReportingDescriptor:
    """Build the descriptor for one rule; missing text becomes the empty string."""
    short_text = description.short_description if description else None
    full_text = description.full_description if description else None
    return ReportingDescriptor(
        id=rule_id,
        deprecated_ids=[],
        short_description=MultiformatMessageString(text=short_text or ""),
        full_description=MultiformatMessageString(text=full_text or ""),
    )


class RuleRegistry:
    """
    The rules of one run, in a stable order, plus an O(1) index by rule id.

    Built fresh for every run from the description catalog; a registry is
    never merged with the one from a previous run. Indices depend only on the
    identifier, so edits to description text cannot break the lookup.
    """

    def __init__(self, entries: Iterable[tuple[str, Optional[RuleDescription]]] = ()) -> None:
        self._descriptors: list[ReportingDescriptor] = []
        self._index: dict[str, int] = {}
        for rule_id, description in entries:
            if rule_id in self._index:
                logger.debug("Duplicate rule %s ignored; keeping first description", rule_id)
                continue
            self._index[rule_id] = len(self._descriptors)
            self._descriptors.append(make_descriptor(rule_id, description))

    @classmethod
    def from_catalog(cls, catalog: RuleDescriptionCatalog) -> RuleRegistry:
        """One descriptor per catalog entry, in catalog order."""
        return cls(catalog.items())

    @property
    def descriptors(self) -> list[ReportingDescriptor]:
        """A fresh list of the descriptors, suitable for toolComponent.rules."""
        return list(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._index

    def descriptor(self, rule_id: str) -> Optional[ReportingDescriptor]:
        index = self._index.get(rule_id)
        return self._descriptors[index] if index is not None else None

    def index_of(self, rule_id: str) -> int:
        """
        Position of the rule's descriptor in this run's rule list.

        Returns -1 (SARIF's "not in the rules array") only for identifiers the
        catalog does not describe at all; that case is logged.
        """
        index = self._index.get(rule_id)
        if index is None:
            logger.warning("Rule %s has no description; result will carry ruleIndex -1", rule_id)
            return RULE_NOT_FOUND
        return index
