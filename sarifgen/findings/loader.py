# Findings loading: read a JSON list of findings written by the analysis.
# Unreadable or invalid files are logged and reported as None so a caller can
# skip them and keep going with the remaining inputs.

import logging
from pathlib import Path
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from sarifgen.findings.models import Finding

logger = logging.getLogger(__name__)

_FINDINGS_ADAPTER = TypeAdapter(List[Finding])


def parse_findings(raw: bytes) -> List[Finding]:
    """
    Validate JSON bytes holding a list of findings.

    Raises:
        pydantic.ValidationError: the JSON is malformed or does not match the
            Finding model.
    """
    return _FINDINGS_ADAPTER.validate_json(raw)


def load_findings(path: Path) -> Optional[List[Finding]]:
    """
    Read one findings file.

    Returns:
        The findings in file order, or None if the file could not be read or
        did not validate (the reason is logged).
    """
    try:
        raw = path.read_bytes()
    except OSError as e:
        logger.error("Failed to read findings file %s: %s", path, e)
        return None

    try:
        findings = parse_findings(raw)
    except ValidationError as e:
        logger.error("Invalid findings in %s: %s", path, e)
        return None

    logger.info("Loaded %d finding(s) from %s", len(findings), path)
    return findings


def load_all_findings(paths: List[Path]) -> List[List[Finding]]:
    """
    Load several findings files, one list per readable file.

    Order matches the input order; files that fail to load are omitted.
    """
    loaded: List[List[Finding]] = []
    for path in paths:
        findings = load_findings(path)
        if findings is None:
            logger.warning("Skipping %s", path)
            continue
        loaded.append(findings)
    return loaded
