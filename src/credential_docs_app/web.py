"""WSGI application serving credential API documentation.

Endpoints:
    GET /health
    GET /xpanse/credentials/openapi/<csp>/<type>   -> {"url": "..."}
    GET /<openapi_path>/<file>.html               -> the rendered page
"""

import json
from collections.abc import Callable, Iterable
from typing import Any

import structlog

from credential_docs_core.exceptions import (
    NoCredentialDefinitionAvailableError,
    OpenApiFileGenerationError,
    PluginNotFoundError,
)
from credential_docs_core.models import CredentialType, Csp
from credential_docs_core.naming import HTML_SUFFIX
from credential_docs_core.orchestrator import CredentialOpenApiGenerator

# Get logger for this module
logger = structlog.get_logger(__name__)

CREDENTIAL_OPENAPI_ROUTE = "/xpanse/credentials/openapi/"

StartResponse = Callable[..., Any]
WSGIApp = Callable[[dict[str, Any], StartResponse], Iterable[bytes]]

_STATUS = {
    200: "200 OK",
    400: "400 Bad Request",
    404: "404 Not Found",
    405: "405 Method Not Allowed",
    500: "500 Internal Server Error",
}


def _json(
    start_response: StartResponse, status: int, body: dict[str, Any]
) -> list[bytes]:
    payload = json.dumps(body).encode("utf-8")
    start_response(
        _STATUS[status],
        [
            ("Content-Type", "application/json"),
            ("Content-Length", str(len(payload))),
        ],
    )
    return [payload]


def _failure(
    start_response: StartResponse, status: int, result_type: str, detail: str
) -> list[bytes]:
    return _json(
        start_response,
        status,
        {"resultType": result_type, "details": [detail], "success": False},
    )


def create_docs_app(generator: CredentialOpenApiGenerator) -> WSGIApp:
    """Create the WSGI application for a configured generator."""
    docs_dir = generator.openapi_path.strip("/")
    docs_prefix = f"/{docs_dir}/" if docs_dir else "/"

    def credential_openapi(path: str, start_response: StartResponse) -> list[bytes]:
        parts = path[len(CREDENTIAL_OPENAPI_ROUTE) :].strip("/").split("/")
        if len(parts) != 2:  # noqa: PLR2004
            return _failure(start_response, 404, "Parameters Invalid", "Not found")
        try:
            csp = Csp(parts[0])
            credential_type = CredentialType(parts[1])
        except ValueError as e:
            return _failure(start_response, 400, "Parameters Invalid", str(e))

        try:
            url = generator.get_credential_openapi_url(csp, credential_type)
        except (NoCredentialDefinitionAvailableError, PluginNotFoundError) as e:
            return _failure(start_response, 404, "Parameters Invalid", e.message)
        except OpenApiFileGenerationError as e:
            return _failure(start_response, 500, "Runtime Failure", e.message)
        return _json(start_response, 200, {"url": url})

    def artifact(path: str, start_response: StartResponse) -> list[bytes]:
        file_name = path[len(docs_prefix) :]
        if (
            "/" in file_name
            or not file_name.endswith(HTML_SUFFIX)
            or not generator.store.exists(file_name)
        ):
            return _failure(start_response, 404, "Parameters Invalid", "Not found")
        content = generator.store.path(file_name).read_bytes()
        start_response(
            _STATUS[200],
            [
                ("Content-Type", "text/html; charset=utf-8"),
                ("Content-Length", str(len(content))),
            ],
        )
        return [content]

    def app(environ: dict[str, Any], start_response: StartResponse) -> list[bytes]:
        method = environ.get("REQUEST_METHOD", "GET")
        path = environ.get("PATH_INFO", "/")
        logger.debug("REQUEST_RECEIVED", method=method, path=path)

        if method != "GET":
            return _failure(start_response, 405, "Parameters Invalid", "GET only")
        if path == "/health":
            return _json(start_response, 200, {"status": "ok"})
        if path.startswith(CREDENTIAL_OPENAPI_ROUTE):
            return credential_openapi(path, start_response)
        if path.startswith(docs_prefix):
            return artifact(path, start_response)
        return _failure(start_response, 404, "Parameters Invalid", "Not found")

    return app
