"""OpenAPI document synthesis for credential submission APIs.

This module builds the OpenAPI 3.0.1 document that describes how a client
submits one kind of credential for one cloud service provider. Synthesis is
pure: it never touches the filesystem or the network.
"""

import json
from collections.abc import Iterable
from typing import Any

import structlog

from credential_docs_core.models import (
    CredentialDefinition,
    CredentialType,
    CredentialVariable,
    Csp,
)

# Get logger for this module
logger = structlog.get_logger(__name__)

OPENAPI_VERSION = "3.0.1"
CREDENTIALS_PATH = "/xpanse/credentials"
CREDENTIALS_TAG = "Credentials Management"

RESULT_TYPES = [
    "Success",
    "Runtime Failure",
    "Parameters Invalid",
    "Terraform Script Invalid",
    "Unprocessable Entity",
    "Response Not Valid",
]

ERROR_RESPONSES = {
    "400": "Bad Request",
    "404": "Not Found",
    "422": "Unprocessable Entity",
    "500": "Internal Server Error",
}


def build_variables_example(variables: Iterable[CredentialVariable]) -> str:
    """Serialize the example payload for a credential's variables.

    Each variable is projected into a fresh dict whose ``value`` is its
    description; the variables themselves are left untouched.

    Args:
        variables: The credential variable templates of a definition.

    Returns:
        Compact JSON array text, or an empty string if serialization fails.
    """
    try:
        projections = [variable.as_example() for variable in variables]
        return json.dumps(projections, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError, AttributeError) as e:
        logger.exception("VARIABLES_EXAMPLE_SERIALIZATION_FAILED", error=str(e))
        return ""


def _error_response(description: str) -> dict[str, Any]:
    return {
        "description": description,
        "content": {
            "*/*": {"schema": {"$ref": "#/components/schemas/Response"}},
        },
    }


def _response_schema() -> dict[str, Any]:
    return {
        "required": ["details", "resultType", "success"],
        "type": "object",
        "properties": {
            "resultType": {
                "type": "string",
                "description": "The result code of response.",
                "enum": list(RESULT_TYPES),
            },
            "details": {
                "type": "array",
                "description": "Details of the errors occurred",
                "items": {
                    "type": "string",
                    "description": "Details of the errors occurred",
                },
            },
            "success": {
                "type": "boolean",
                "description": "Describes if the request is successful",
            },
        },
    }


def _create_credential_schema(
    definition: CredentialDefinition, variables_example: Any
) -> dict[str, Any]:
    return {
        "required": ["csp", "name", "timeToLive", "type", "variables"],
        "type": "object",
        "properties": {
            "name": {
                "type": "string",
                "example": definition.name,
                "description": "The name of the credential",
            },
            "csp": {
                "type": "string",
                "example": str(definition.csp),
                "description": "The cloud service provider of the credential.",
                "enum": [csp.value for csp in Csp],
            },
            "description": {
                "type": "string",
                "example": definition.description,
                "description": "The description of the credential",
            },
            "type": {
                "type": "string",
                "example": str(definition.type),
                "description": "The type of the credential",
                "enum": [credential_type.value for credential_type in CredentialType],
            },
            "variables": {
                "type": "array",
                "example": variables_example,
                "description": "The variables list of the credential",
                "items": {"$ref": "#/components/schemas/CredentialVariable"},
            },
            "timeToLive": {
                "type": "integer",
                "description": "The time in seconds to live of the credential",
                "format": "int32",
                "example": 3600,
            },
        },
    }


def _credential_variable_schema() -> dict[str, Any]:
    return {
        "required": ["description", "name", "value"],
        "type": "object",
        "properties": {
            "name": {
                "type": "string",
                "description": "The name of the CredentialVariable,this field is "
                "provided by the the plugin of cloud service provider.",
            },
            "description": {
                "type": "string",
                "description": "The description of the CredentialVariable,this field "
                "is provided by the plugin of cloud service provider.",
            },
            "value": {
                "type": "string",
                "description": "The value of the CredentialVariable, this field is "
                "filled by the user.",
            },
        },
        "description": "The variables list of the credential",
    }


def build_openapi_document(
    definition: CredentialDefinition, service_url: str, app_version: str
) -> dict[str, Any]:
    """Build the OpenAPI document for a credential definition as a dict.

    Args:
        definition: The credential definition to document.
        service_url: Base URL of the service, used as the only server entry.
        app_version: Application version reported in ``info.version``.

    Returns:
        The OpenAPI document.
    """
    csp = str(definition.csp)
    credential_type = str(definition.type)

    example_text = build_variables_example(definition.variables)
    # A failed serialization degrades to an empty example
    variables_example: Any = json.loads(example_text) if example_text else ""

    responses: dict[str, Any] = {
        "200": {
            "description": "OK",
            "content": {"application/json": {"schema": {"type": "boolean"}}},
        },
    }
    responses.update(
        {code: _error_response(text) for code, text in ERROR_RESPONSES.items()}
    )

    return {
        "openapi": OPENAPI_VERSION,
        "info": {
            "title": "OpenAPI definition",
            "description": "OpenAPI for users adding credential to connect the "
            f"cloud service provider {csp}",
            "version": app_version,
        },
        "servers": [{"url": service_url, "description": "Generated server url"}],
        "tags": [
            {
                "name": CREDENTIALS_TAG,
                "description": "APIs to manage credentials for authentication.",
            }
        ],
        "paths": {
            CREDENTIALS_PATH: {
                "post": {
                    "tags": [CREDENTIALS_TAG],
                    "description": f"Add credential with type {credential_type} "
                    f"of the cloud service provider {csp}.",
                    "operationId": "addCredential",
                    "requestBody": {
                        "content": {
                            "application/json": {
                                "schema": {
                                    "$ref": "#/components/schemas/CreateCredential"
                                }
                            }
                        },
                        "required": True,
                    },
                    "responses": responses,
                }
            }
        },
        "components": {
            "schemas": {
                "Response": _response_schema(),
                "CreateCredential": _create_credential_schema(
                    definition, variables_example
                ),
                "CredentialVariable": _credential_variable_schema(),
            }
        },
    }


def synthesize_credential_openapi(
    definition: CredentialDefinition, service_url: str, app_version: str
) -> str:
    """Synthesize the OpenAPI JSON text for a credential definition.

    Args:
        definition: The credential definition to document.
        service_url: Base URL of the service.
        app_version: Application version reported in ``info.version``.

    Returns:
        The OpenAPI document serialized as indented JSON.
    """
    document = build_openapi_document(definition, service_url, app_version)
    return json.dumps(document, indent=4, ensure_ascii=False)
