# Run assembly: tool/driver metadata, fixed run-level settings, and the mapped results.

from __future__ import annotations

import logging
from typing import Iterable, List

from sarifgen.config import ToolInfo
from sarifgen.descriptions import RuleDescriptionCatalog
from sarifgen.findings.models import Finding
from sarifgen.sarif.results import ResultMapper
from sarifgen.sarif.rules import RuleRegistry
from sarifgen.sarif.schema import ColumnKind, Result, Run, Tool, ToolComponent

logger = logging.getLogger(__name__)

REDACTION_TOKEN = "[REDACTED]"


def build_tool(tool_info: ToolInfo, registry: RuleRegistry) -> Tool:
    """Driver carrying the run's rules; extensions are present but empty."""
    driver = ToolComponent(
        name=tool_info.name,
        version=tool_info.version,
        download_uri=tool_info.download_uri,
        information_uri=tool_info.information_uri,
        organization=tool_info.organization,
        rules=registry.descriptors,
    )
    return Tool(driver=driver, extensions=[])


class RunBuilder:
    """Builds one SARIF run per set of findings, always for the same tool identity."""

    def __init__(self, tool_info: ToolInfo) -> None:
        self.tool_info = tool_info

    def build_run(self, tool: Tool, results: List[Result]) -> Run:
        """
        Wrap tool and results into a run.

        Columns are declared as UTF-16 code units and a single redaction
        token is registered. No artifacts or graphs are produced, and every
        other run property stays absent.
        """
        return Run(
            tool=tool,
            results=results,
            column_kind=ColumnKind.UTF16_CODE_UNITS,
            redaction_tokens=[REDACTION_TOKEN],
        )

    def build(self, findings: Iterable[Finding], catalog: RuleDescriptionCatalog) -> Run:
        """Full pipeline for one run: registry, tool, results, run."""
        registry = RuleRegistry.from_catalog(catalog)
        tool = build_tool(self.tool_info, registry)
        results = ResultMapper(catalog, registry).map_findings(findings)
        logger.debug("Built run with %d rule(s) and %d result(s)", len(registry), len(results))
        return self.build_run(tool, results)
