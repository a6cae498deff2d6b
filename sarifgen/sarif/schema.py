# Pydantic models for the subset of SARIF 2.1.0 this package writes.
#
# Attributes are snake_case and serialize under their camelCase schema names.
# None means the property is absent from the output; an empty list is emitted
# as []. Properties the engine never fills are still declared so that their
# absence is explicit.

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

SCHEMA_URI = "https://json.schemastore.org/sarif-2.1.0.json"
SCHEMA_VERSION = "2.1.0"


class Level(str, Enum):
    NONE = "none"
    NOTE = "note"
    WARNING = "warning"
    ERROR = "error"


class ColumnKind(str, Enum):
    UTF16_CODE_UNITS = "utf16CodeUnits"
    UNICODE_CODE_POINTS = "unicodeCodePoints"


class SarifModel(BaseModel):
    """Base for all SARIF objects: camelCase aliases, construction by field name."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MultiformatMessageString(SarifModel):
    text: str
    markdown: Optional[str] = None


class Message(SarifModel):
    text: str
    markdown: Optional[str] = None
    id: Optional[str] = None
    arguments: Optional[List[str]] = None


class Region(SarifModel):
    """Text region, 1-based. -1 is kept for coordinates the analysis could not determine."""

    start_line: int
    end_line: int
    start_column: int
    end_column: int
    char_offset: Optional[int] = None
    byte_offset: Optional[int] = None


class ArtifactLocation(SarifModel):
    uri: Optional[str] = None
    uri_base_id: Optional[str] = None
    index: Optional[int] = None
    description: Optional[Message] = None


class PhysicalLocation(SarifModel):
    artifact_location: ArtifactLocation
    region: Optional[Region] = None
    context_region: Optional[Region] = None


class Location(SarifModel):
    id: int = -1
    physical_location: Optional[PhysicalLocation] = None
    message: Optional[Message] = None
    annotations: Optional[List[Region]] = None
    relationships: Optional[List[Any]] = None
    logical_locations: Optional[List[Any]] = None


class ReportingDescriptor(SarifModel):
    id: str
    deprecated_ids: Optional[List[str]] = None
    deprecated_guids: Optional[List[str]] = None
    deprecated_names: Optional[List[str]] = None
    short_description: Optional[MultiformatMessageString] = None
    full_description: Optional[MultiformatMessageString] = None


class ToolComponent(SarifModel):
    name: str
    version: Optional[str] = None
    download_uri: Optional[str] = None
    information_uri: Optional[str] = None
    organization: Optional[str] = None
    rules: Optional[List[ReportingDescriptor]] = None
    notifications: Optional[List[Any]] = None
    taxa: Optional[List[Any]] = None
    locations: Optional[List[Any]] = None


class Tool(SarifModel):
    driver: ToolComponent
    extensions: Optional[List[ToolComponent]] = None


class Result(SarifModel):
    rule_id: Optional[str] = None
    rule_index: int = -1
    kind: Optional[str] = None
    level: Optional[Level] = None
    message: Message
    locations: Optional[List[Location]] = None
    analysis_target: Optional[ArtifactLocation] = None
    related_locations: Optional[List[Location]] = None
    attachments: Optional[List[Any]] = None
    fixes: Optional[List[Any]] = None
    graph_traversals: Optional[List[Any]] = None
    stacks: Optional[List[Any]] = None
    code_flows: Optional[List[Any]] = None
    graphs: Optional[List[Any]] = None
    suppressions: Optional[List[Any]] = None
    work_item_uris: Optional[List[str]] = None
    taxa: Optional[List[Any]] = None


class Run(SarifModel):
    tool: Tool
    results: Optional[List[Result]] = None
    column_kind: Optional[ColumnKind] = None
    redaction_tokens: Optional[List[str]] = None
    artifacts: Optional[List[Any]] = None
    graphs: Optional[List[Any]] = None
    thread_flow_locations: Optional[List[Any]] = None
    taxonomies: Optional[List[Any]] = None
    addresses: Optional[List[Any]] = None
    translations: Optional[List[Any]] = None
    policies: Optional[List[Any]] = None
    web_requests: Optional[List[Any]] = None
    web_responses: Optional[List[Any]] = None
    run_aggregates: Optional[List[Any]] = None
    invocations: Optional[List[Any]] = None
    version_control_provenance: Optional[List[Any]] = None
    logical_locations: Optional[List[Any]] = None


class SarifLog(SarifModel):
    """Top-level SARIF document: schema URI, version and the runs."""

    schema_uri: str = Field(SCHEMA_URI, alias="$schema")
    version: str = SCHEMA_VERSION
    runs: List[Run] = Field(default_factory=list)
