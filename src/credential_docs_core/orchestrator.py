"""Generation and lookup of credential API documentation.

This module provides the CredentialOpenApiGenerator, which turns the credential
definitions declared by provider plugins into rendered HTML API references and
resolves the URL each reference is served under.

A generation attempt runs synthesize -> write JSON -> render -> rename HTML ->
delete JSON. The JSON file is removed on every exit path. Generation for one
key is serialised by a per-key lock, so concurrent requests for a missing page
collapse into a single render.
"""

import subprocess
import threading

import structlog

from credential_docs_core.artifact_store import ArtifactStore
from credential_docs_core.exceptions import (
    NoCredentialDefinitionAvailableError,
    OpenApiFileGenerationError,
)
from credential_docs_core.models import (
    CredentialDefinition,
    CredentialType,
    CredentialTypeKey,
    Csp,
    GeneratedArtifactPair,
)
from credential_docs_core.naming import (
    HTML_SUFFIX,
    JSON_SUFFIX,
    credential_api_file_name,
)
from credential_docs_core.plugins import PluginManager
from credential_docs_core.renderer import RENDERED_INDEX_FILE, Renderer
from credential_docs_core.synthesizer import synthesize_credential_openapi

# Get logger for this module
logger = structlog.get_logger(__name__)


class CredentialOpenApiGenerator:
    """Generates, caches and resolves credential API documentation."""

    def __init__(
        self,
        plugin_manager: PluginManager,
        store: ArtifactStore,
        renderer: Renderer,
        service_url: str,
        openapi_path: str,
        app_version: str = "1.0.0",
    ) -> None:
        """Initialize the generator.

        Args:
            plugin_manager: Source of provider plugins and credential definitions.
            store: Working directory for JSON inputs and HTML outputs.
            renderer: Tool that turns an OpenAPI JSON file into HTML.
            service_url: Base URL of the service.
            openapi_path: Relative path the HTML pages are served under.
            app_version: Application version reported in the documents.
        """
        self.plugin_manager = plugin_manager
        self.store = store
        self.renderer = renderer
        self._service_url = service_url
        self.openapi_path = openapi_path
        self.app_version = app_version
        self._locks: dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    @property
    def service_url(self) -> str:
        return self._service_url

    def _lock_for(self, csp: Csp, credential_type: CredentialType) -> threading.Lock:
        name = credential_api_file_name(csp, credential_type)
        with self._locks_guard:
            return self._locks.setdefault(name, threading.Lock())

    def artifact_pair(
        self, csp: Csp, credential_type: CredentialType
    ) -> GeneratedArtifactPair:
        return GeneratedArtifactPair(
            json_path=self.store.path(
                credential_api_file_name(csp, credential_type, JSON_SUFFIX)
            ),
            html_path=self.store.path(
                credential_api_file_name(csp, credential_type, HTML_SUFFIX)
            ),
        )

    def on_startup(self) -> None:
        """Generate documentation for every registered credential type."""
        self.generate_all()

    def generate_all(self) -> list[CredentialTypeKey]:
        """Generate documentation for every provider and credential type.

        Duplicate types within one provider are collapsed, the first
        definition wins. A failure for one key is logged and the sweep
        carries on with the remaining keys.

        Returns:
            Keys whose generation raised an error.
        """
        failed: list[CredentialTypeKey] = []
        for csp, plugin in self.plugin_manager.get_plugins_map().items():
            if plugin.credential_definitions is None:
                logger.info("CREDENTIAL_DEFINITION_NOT_FOUND", csp=str(csp))
                continue
            for definition in plugin.definitions_by_type().values():
                try:
                    with self._lock_for(definition.csp, definition.type):
                        self.generate_one(definition)
                except Exception as e:
                    logger.exception(
                        "CREDENTIAL_API_GENERATION_SKIPPED",
                        csp=str(definition.csp),
                        type=str(definition.type),
                        error=str(e),
                    )
                    failed.append(definition.key)
        return failed

    def generate_one(self, definition: CredentialDefinition) -> GeneratedArtifactPair:
        """Generate the HTML documentation for one credential definition.

        A non-zero renderer exit is logged; it only raises when the renderer
        also left no HTML output behind. A successful exit without output is
        logged and not raised.

        Args:
            definition: The credential definition to document.

        Returns:
            The JSON and HTML paths of this attempt.

        Raises:
            OpenApiFileGenerationError: If the JSON can't be written, the
                generator jar or the JSON input is missing, or running the
                renderer fails.
        """
        pair = self.artifact_pair(definition.csp, definition.type)
        json_file = pair.json_path.name
        html_file = pair.html_path.name

        try:
            self.store.ensure_dir()
            api_docs_json = synthesize_credential_openapi(
                definition, self.service_url, self.app_version
            )
            self.store.store(json_file, api_docs_json)
            logger.info("CREDENTIAL_API_JSON_CREATED", file=json_file)

            if not (self.store.exists(json_file) and self.renderer.is_available()):
                logger.error(
                    "CREDENTIAL_API_HTML_NOT_GENERATED",
                    file=html_file,
                    reason="Missing json or openapi-generator jar file",
                )
                error_message = (
                    f"Not generating {html_file} file. "
                    "Missing json or openapi-generator jar file"
                )
                raise OpenApiFileGenerationError(error_message, html_file)

            self._render(pair)

        except (OSError, subprocess.SubprocessError) as e:
            logger.exception(
                "CREDENTIAL_API_HTML_CREATION_FAILED", file=html_file, error=str(e)
            )
            error_message = f"credentialApi html file creation failed: {e}"
            raise OpenApiFileGenerationError(error_message, html_file) from e
        finally:
            self.store.remove(pair.json_path)

        return pair

    def _render(self, pair: GeneratedArtifactPair) -> None:
        html_file = pair.html_path.name
        with self.store.scratch(pair.html_path.stem) as output_dir:
            result = self.renderer.render(pair.json_path, output_dir)
            if not result.succeeded:
                logger.error(
                    "CREDENTIAL_API_HTML_CREATION_FAILED",
                    file=html_file,
                    exit_code=result.exit_code,
                    output=result.output,
                )

            rendered = output_dir / RENDERED_INDEX_FILE
            if rendered.is_file():
                self.store.move(rendered, html_file)
                logger.info("CREDENTIAL_API_HTML_CREATED", file=html_file)
            elif not result.succeeded:
                error_message = (
                    f"credentialApi html file creation failed: renderer exited "
                    f"with code {result.exit_code}"
                )
                raise OpenApiFileGenerationError(error_message, html_file)
            else:
                logger.warning(
                    "CREDENTIAL_API_HTML_OUTPUT_MISSING",
                    file=html_file,
                    expected=RENDERED_INDEX_FILE,
                )

    def get_credential_openapi_url(
        self, csp: Csp, credential_type: CredentialType
    ) -> str:
        """Get the URL of the credential API documentation, generating it if needed.

        Args:
            csp: The cloud service provider.
            credential_type: The type of credential.

        Returns:
            The URL of the rendered HTML page.

        Raises:
            NoCredentialDefinitionAvailableError: If the provider declares no
                credential definition of that type.
            PluginNotFoundError: If no plugin is registered for the provider.
            OpenApiFileGenerationError: If on-demand generation fails.
        """
        html_file = credential_api_file_name(csp, credential_type, HTML_SUFFIX)
        with self._lock_for(csp, credential_type):
            if not self.store.exists(html_file):
                plugin = self.plugin_manager.get_plugin(csp)
                definition = plugin.find_definition(credential_type)
                if definition is None:
                    error = NoCredentialDefinitionAvailableError(
                        str(csp), str(credential_type)
                    )
                    logger.error(
                        "CREDENTIAL_DEFINITION_NOT_AVAILABLE",
                        csp=str(csp),
                        type=str(credential_type),
                        error=error.message,
                    )
                    raise error
                self.generate_one(definition)
        return self.build_url(html_file)

    resolve_url = get_credential_openapi_url

    def build_url(self, file_name: str) -> str:
        """Join the service URL, documentation path and file name.

        Exactly one "/" separates each part, whatever slashes the configured
        values carry. An empty documentation path is skipped.
        """
        parts = [self.service_url.rstrip("/"), self.openapi_path.strip("/"), file_name]
        return "/".join(part for part in parts if part)
