# Finding -> SARIF result mapping: kind/level, message text and id, locations, rule index.

from __future__ import annotations

import logging
from typing import Iterable, List, Optional
from urllib.parse import unquote, urlsplit

from sarifgen.descriptions import RuleDescriptionCatalog
from sarifgen.findings.models import Action, Finding, FindingLocation, ResultKind
from sarifgen.sarif.coordinates import map_region
from sarifgen.sarif.rules import RuleRegistry
from sarifgen.sarif.schema import (
    ArtifactLocation,
    Level,
    Location,
    Message,
    PhysicalLocation,
    Result,
)

logger = logging.getLogger(__name__)

# Action -> level, only consulted for failing results
ACTION_LEVELS: dict[Action, Level] = {
    Action.FAIL: Level.ERROR,
    Action.WARN: Level.WARNING,
    Action.INFO: Level.NOTE,
}


def level_for(kind: ResultKind, action: Optional[Action]) -> Level:
    """Severity level of a result; anything but a failing result is level none."""
    if kind != ResultKind.FAIL or action is None:
        return Level.NONE
    return ACTION_LEVELS.get(action, Level.NONE)


def message_id(identifier: str, counter: int) -> str:
    return f"{identifier}Message{counter}"


def _uri_path(uri: str) -> str:
    """
    Percent-decoded path component of a URI.

    "file:///src/a.c" and "file:/src/a.c" both give "/src/a.c". Plain paths
    have no scheme and are only decoded; a one-letter scheme is a Windows
    drive ("C:\\src\\a.c") and is kept as part of the path.
    """
    parts = urlsplit(uri)
    if len(parts.scheme) > 1:
        return unquote(parts.path)
    return unquote(uri)


def map_location(location: FindingLocation, location_id: int) -> Location:
    """One physical location: the artifact path and the translated region, nothing else."""
    artifact = ArtifactLocation(uri=_uri_path(location.uri))
    physical = PhysicalLocation(artifact_location=artifact, region=map_region(location.region))
    return Location(id=location_id, physical_location=physical)


class ResultMapper:
    """
    Turns findings into SARIF results for one run.

    The catalog supplies message text; the registry supplies rule indices for
    the run under construction.
    """

    def __init__(self, catalog: RuleDescriptionCatalog, registry: RuleRegistry) -> None:
        self.catalog = catalog
        self.registry = registry

    def message_text(self, finding: Finding) -> str:
        if finding.kind == ResultKind.PASS:
            text = self.catalog.pass_description(finding.identifier)
        else:
            text = self.catalog.full_description(finding.identifier)
        return text or ""

    def map_finding(self, finding: Finding, counter: int) -> Result:
        """
        Map one finding to a result.

        Args:
            finding: The finding to report.
            counter: Call-local sequence number of this finding; makes the
                message id unique among all results built in the same push.

        Returns:
            A Result whose unused properties (stacks, code flows, graphs,
            suppressions, work items, taxa, ...) are all left absent.
        """
        message = Message(
            text=self.message_text(finding),
            id=message_id(finding.identifier, counter),
            arguments=[],
        )
        locations = [map_location(loc, i) for i, loc in enumerate(finding.locations)]

        return Result(
            rule_id=finding.identifier,
            rule_index=self.registry.index_of(finding.identifier),
            kind=finding.kind.value,
            level=level_for(finding.kind, finding.action),
            message=message,
            locations=locations,
        )

    def map_findings(self, findings: Iterable[Finding]) -> List[Result]:
        """Map findings in order; the message counter runs 0..n-1 across all of them."""
        results = [self.map_finding(finding, counter) for counter, finding in enumerate(findings)]
        logger.debug("Mapped %d finding(s) to results", len(results))
        return results
