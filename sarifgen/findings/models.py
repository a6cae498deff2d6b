# Pydantic data models for analysis findings: Finding, FindingLocation, SourceRegion.
# Positions here are 0-based as produced by the analyzer; -1 means "unknown".

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

UNSET = -1


class ResultKind(str, Enum):
    """Evaluation state of a finding, spelled the way SARIF spells result kinds."""

    PASS = "pass"
    OPEN = "open"
    INFORMATIONAL = "informational"
    NOT_APPLICABLE = "notApplicable"
    REVIEW = "review"
    FAIL = "fail"


class Action(str, Enum):
    """Severity action attached to the rule that produced a finding."""

    FAIL = "FAIL"
    WARN = "WARN"
    INFO = "INFO"


class SourceRegion(BaseModel):
    """A 0-based line/column span. Any field may be -1 (unset)."""

    start_line: int = Field(UNSET, ge=UNSET, description="0-based line, -1 if unknown")
    end_line: int = Field(UNSET, ge=UNSET)
    start_column: int = Field(UNSET, ge=UNSET, description="0-based column, -1 if unknown")
    end_column: int = Field(UNSET, ge=UNSET)

    model_config = ConfigDict(frozen=True)


class FindingLocation(BaseModel):
    """Where in the source a finding was reported (artifact URI plus region)."""

    uri: str
    region: SourceRegion = Field(default_factory=SourceRegion)

    model_config = ConfigDict(frozen=True)


class Finding(BaseModel):
    """A single observation reported by the analysis (e.g. a failed order check in a.c)."""

    identifier: str
    kind: ResultKind
    action: Optional[Action] = None
    locations: List[FindingLocation] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)
