from __future__ import annotations

"""
The SARIF document of one analysis session.

A ReportDocument is an ordinary object owned by whoever runs the session; there
is no module-level instance. Each push() turns one set of findings into a run
and stacks it on top of the earlier ones; pop() takes the most recent run back
off. The schema header is fixed when the document is created.

Not thread-safe: callers sharing a document between threads must serialize
their own push/pop/serialize calls.

Typical usage:
    from sarifgen.descriptions import load_catalog
    from sarifgen.sarif.document import ReportDocument
    from sarifgen.sarif.serializer import write_output

    document = ReportDocument(load_catalog(Path("descriptions.json")))
    document.push(findings)
    write_output(document, Path("report.sarif"))
"""

import logging
from typing import Iterable, Iterator, List, Optional

from sarifgen.config import Config, get_default_config
from sarifgen.descriptions import RuleDescriptionCatalog
from sarifgen.findings.models import Finding
from sarifgen.sarif.runs import RunBuilder
from sarifgen.sarif.schema import Run, SarifLog
from sarifgen.sarif.serializer import serialize

logger = logging.getLogger(__name__)


class EmptyRunStackError(IndexError):
    """Raised by pop() when the document holds no runs."""


class RunStack:
    """Runs in push order; only the top (most recently pushed) run can be removed."""

    def __init__(self) -> None:
        self._runs: List[Run] = []

    def push(self, run: Run) -> None:
        self._runs.append(run)

    def pop(self) -> Run:
        if not self._runs:
            raise EmptyRunStackError("pop from a document with no runs")
        return self._runs.pop()

    def peek(self) -> Optional[Run]:
        """Top run without removing it, or None when empty."""
        return self._runs[-1] if self._runs else None

    def __len__(self) -> int:
        return len(self._runs)

    def __iter__(self) -> Iterator[Run]:
        return iter(self._runs)


class ReportDocument:
    """
    Accumulates runs for one session and exposes them as a SARIF log.

    Args:
        catalog: Rule descriptions used for every push unless one is passed
            to push() explicitly. It is read when push() is called, so
            entries added to it later show up in later runs.
        config: Tool identity and schema header; defaults to
            get_default_config().
    """

    def __init__(
        self,
        catalog: Optional[RuleDescriptionCatalog] = None,
        config: Optional[Config] = None,
    ) -> None:
        if config is None:
            config = get_default_config()
        self.catalog = catalog if catalog is not None else RuleDescriptionCatalog()
        self.config = config
        self._schema_uri = config.schema_uri
        self._version = config.schema_version
        self._builder = RunBuilder(config.tool)
        self._runs = RunStack()

    @property
    def schema_uri(self) -> str:
        return self._schema_uri

    @property
    def version(self) -> str:
        return self._version

    @property
    def runs(self) -> tuple[Run, ...]:
        """Snapshot of the runs, oldest first."""
        return tuple(self._runs)

    @property
    def is_empty(self) -> bool:
        return len(self._runs) == 0

    def __len__(self) -> int:
        return len(self._runs)

    def push(
        self,
        findings: Iterable[Finding],
        catalog: Optional[RuleDescriptionCatalog] = None,
    ) -> None:
        """Build a run from findings and append it after the existing runs."""
        run = self._builder.build(findings, catalog if catalog is not None else self.catalog)
        logger.info("Adding new run to the sarif output (%d result(s))", len(run.results or []))
        self._runs.push(run)

    def pop(self) -> Run:
        """
        Remove and return the most recently pushed run.

        Raises:
            EmptyRunStackError: the document has no runs; nothing is changed.
        """
        run = self._runs.pop()
        logger.info("Removing run from the sarif output")
        return run

    def to_sarif(self) -> SarifLog:
        """The document as a SarifLog model (header plus the current runs)."""
        return SarifLog(schema_uri=self._schema_uri, version=self._version, runs=list(self._runs))

    def to_json(self) -> str:
        """Indented SARIF text, or "" if serialization failed (the failure is logged)."""
        return serialize(self, indent=self.config.indent)
