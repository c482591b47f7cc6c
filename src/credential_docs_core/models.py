"""Data model for credential definitions and generated artifacts.

Credential definitions are supplied by provider plugins. The pipeline only
reads them: example payloads are built from detached projections so the
plugin's canonical templates are never modified.
"""

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any


class Csp(StrEnum):
    """Cloud service providers with a plugin integration."""

    AWS = "aws"
    AZURE = "azure"
    ALICLOUD = "alicloud"
    HUAWEI = "huawei"
    OPENSTACK = "openstack"
    FLEXIBLE_ENGINE = "flexibleEngine"


class CredentialType(StrEnum):
    """Authentication shapes a provider credential can take."""

    VARIABLES = "variables"
    HTTP_AUTHENTICATION = "http_authentication"
    API_KEY = "api_key"
    OAUTH2 = "oauth2"


@dataclass
class CredentialVariable:
    """One field a user must supply for a credential."""

    name: str
    description: str
    value: str = ""
    is_mandatory: bool = True
    is_sensitive: bool = True

    def as_example(self) -> dict[str, Any]:
        """Project the variable with its description standing in as the value."""
        return {
            "name": self.name,
            "description": self.description,
            "value": self.description,
        }


@dataclass
class CredentialDefinition:
    """A credential shape declared by a provider plugin."""

    csp: Csp
    type: CredentialType
    name: str
    description: str
    variables: list[CredentialVariable] = field(default_factory=list)

    @property
    def key(self) -> "CredentialTypeKey":
        return CredentialTypeKey(self.csp, self.type)


@dataclass(frozen=True)
class CredentialTypeKey:
    """Identifies one documentation artifact family."""

    csp: Csp
    type: CredentialType

    def __str__(self) -> str:
        return f"{self.csp}/{self.type}"


@dataclass(frozen=True)
class GeneratedArtifactPair:
    """Paths of one generation attempt: transient JSON and durable HTML."""

    json_path: Path
    html_path: Path


@dataclass(frozen=True)
class RenderInvocationResult:
    """Exit status and combined stdout/stderr of one renderer run."""

    exit_code: int
    output: str

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0
