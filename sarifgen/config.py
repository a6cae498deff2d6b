from __future__ import annotations

"""
Report configuration: identity of the tool written into every run and the SARIF header.

Everything here is fixed when a ReportDocument is created. The CLI in main.py
uses get_default_config(); library callers can build their own Config (for
example to report under the name of the analyzer that produced the findings).
"""

from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError, metadata, version
from typing import Optional

from sarifgen.sarif.schema import SCHEMA_URI, SCHEMA_VERSION

DISTRIBUTION_NAME = "sarifgen"
FALLBACK_VERSION = "0.0.0"

# Used when the distribution metadata is unavailable (running from a source tree)
DEFAULT_ORGANIZATION = "sarifgen developers"
DEFAULT_DOWNLOAD_URI = "https://pypi.org/project/sarifgen/#files"
DEFAULT_INFORMATION_URI = "https://pypi.org/project/sarifgen/"


@dataclass(frozen=True)
class ToolInfo:
    """
    Identity of the tool component ("driver") that produced the findings.

    URIs are optional; when None they are left out of the report.
    """

    name: str = DISTRIBUTION_NAME
    version: str = FALLBACK_VERSION
    download_uri: Optional[str] = None
    information_uri: Optional[str] = None
    organization: Optional[str] = None


@dataclass(frozen=True)
class Config:
    """
    Report configuration.

    Carries the driver identity plus the schema header and output indentation.
    """

    tool: ToolInfo = field(default_factory=ToolInfo)
    schema_uri: str = SCHEMA_URI
    schema_version: str = SCHEMA_VERSION
    indent: int = 2


def get_installed_version(distribution: str = DISTRIBUTION_NAME) -> str:
    """Version of the installed distribution, or 0.0.0 when running from a source tree."""
    try:
        return version(distribution)
    except PackageNotFoundError:
        return FALLBACK_VERSION


def get_installed_identity(distribution: str = DISTRIBUTION_NAME) -> ToolInfo:
    """
    Driver identity from the installed distribution's metadata.

    The download and information URIs come from the Download and
    Documentation entries of [project.urls], the organization from the
    author. Anything the metadata lacks falls back to the DEFAULT_* constants.
    """
    try:
        meta = metadata(distribution)
    except PackageNotFoundError:
        return ToolInfo(
            name=distribution,
            version=FALLBACK_VERSION,
            download_uri=DEFAULT_DOWNLOAD_URI,
            information_uri=DEFAULT_INFORMATION_URI,
            organization=DEFAULT_ORGANIZATION,
        )

    urls: dict[str, str] = {}
    for entry in meta.get_all("Project-URL") or []:
        label, _, url = entry.partition(",")
        urls[label.strip().lower()] = url.strip()

    return ToolInfo(
        name=distribution,
        version=get_installed_version(distribution),
        download_uri=urls.get("download", DEFAULT_DOWNLOAD_URI),
        information_uri=urls.get("documentation", DEFAULT_INFORMATION_URI),
        organization=meta.get("Author") or DEFAULT_ORGANIZATION,
    )


def get_default_config() -> Config:
    """
    Return the default configuration: this package as the driver, SARIF 2.1.0 header.
    """
    return Config(tool=get_installed_identity())
