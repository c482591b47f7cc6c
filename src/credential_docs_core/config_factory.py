"""Configuration and factory functions for the documentation generator.

This module reads the generator settings from environment variables and builds
the CredentialOpenApiGenerator with its collaborators, without global state.

Environment Variables:
    CREDENTIAL_DOCS_SERVICE_URL: Base URL of the service. Default: "http://localhost:8080"
    CREDENTIAL_DOCS_APP_VERSION: Version reported in generated documents. Default: "1.0.0"
    CREDENTIAL_DOCS_OPENAPI_WORKDIR: Working directory for artifacts. Default: "openapi"
    CREDENTIAL_DOCS_OPENAPI_PATH: Relative path pages are served under. Default: "openapi/"
    CREDENTIAL_DOCS_GENERATOR_VERSION: openapi-generator-cli version. Default: "6.6.0"
    CREDENTIAL_DOCS_GENERATOR_DOWNLOAD_URL: Maven repository base for the jar.
    CREDENTIAL_DOCS_GENERATOR_JAR: Explicit jar path; skips the download. Default: None
    CREDENTIAL_DOCS_DOWNLOAD_GENERATOR: Download the jar when missing. Default: "true"
    CREDENTIAL_DOCS_JAVA_COMMAND: JVM launcher. Default: "java"
"""

import shlex
from collections.abc import Mapping

import environ
import structlog

from credential_docs_core.artifact_store import ArtifactStore
from credential_docs_core.exceptions import ConfigurationError, GeneratorDownloadError
from credential_docs_core.generator_cli import (
    DEFAULT_DOWNLOAD_URL,
    DEFAULT_GENERATOR_VERSION,
    OpenApiGeneratorJar,
)
from credential_docs_core.orchestrator import CredentialOpenApiGenerator
from credential_docs_core.plugins import PluginManager
from credential_docs_core.renderer import OpenApiGeneratorRenderer, Renderer

# Get logger for this module
logger = structlog.get_logger(__name__)

ENV_PREFIX = "CREDENTIAL_DOCS"


@environ.config(prefix=ENV_PREFIX)
class DocsConfig:
    """Settings of the credential documentation generator."""

    service_url: str = environ.var(
        default="http://localhost:8080", help="Base URL of the service"
    )
    app_version: str = environ.var(
        default="1.0.0", help="Version reported in generated documents"
    )
    openapi_workdir: str = environ.var(
        default="openapi", help="Working directory for generated artifacts"
    )
    openapi_path: str = environ.var(
        default="openapi/", help="Relative path the HTML pages are served under"
    )
    generator_version: str = environ.var(
        default=DEFAULT_GENERATOR_VERSION, help="openapi-generator-cli version"
    )
    generator_download_url: str = environ.var(
        default=DEFAULT_DOWNLOAD_URL,
        help="Maven repository base URL of openapi-generator-cli",
    )
    generator_jar: str | None = environ.var(
        default=None, help="Explicit path of the openapi-generator-cli jar"
    )
    download_generator: bool = environ.bool_var(
        default=True, help="Download the generator jar when it is missing"
    )
    java_command: str = environ.var(default="java", help="JVM launcher command")


def load_docs_config(env: Mapping[str, str] | None = None) -> DocsConfig:
    """Read a DocsConfig from environment variables.

    Args:
        env: Environment mapping to read. If None, uses os.environ.

    Raises:
        ConfigurationError: If a variable has an invalid value.
    """
    try:
        if env is None:
            return environ.to_config(DocsConfig)
        return environ.to_config(DocsConfig, environ=env)
    except (environ.MissingEnvValueError, ValueError) as e:
        raise ConfigurationError(f"Invalid configuration: {e}", "docs_config") from e


def create_generator_jar(config: DocsConfig) -> OpenApiGeneratorJar:
    return OpenApiGeneratorJar(
        workdir=config.openapi_workdir,
        version=config.generator_version,
        download_url=config.generator_download_url,
        jar_path=config.generator_jar,
    )


def create_renderer(config: DocsConfig, *, ensure_jar: bool = True) -> Renderer:
    """Create the openapi-generator renderer.

    When ``ensure_jar`` is set and downloads are enabled, a missing jar is
    fetched the first time a render needs it, so lookups of pages that already
    exist never download it. A failed download is logged; generation then
    reports the missing jar for each key.
    """
    jar = create_generator_jar(config)

    def fetch_jar() -> None:
        try:
            jar.ensure()
        except GeneratorDownloadError as e:
            logger.error("GENERATOR_JAR_UNAVAILABLE", error=e.message, url=e.url)

    download = ensure_jar and config.download_generator and not config.generator_jar
    launcher = (*shlex.split(config.java_command), "-jar")
    return OpenApiGeneratorRenderer(
        jar.cli_file, launcher=launcher, provision=fetch_jar if download else None
    )


def create_credential_openapi_generator(
    config: DocsConfig | None = None,
    plugin_manager: PluginManager | None = None,
    renderer: Renderer | None = None,
) -> CredentialOpenApiGenerator:
    """Create a fully wired CredentialOpenApiGenerator.

    Args:
        config: Generator settings. If None, read from the environment.
        plugin_manager: Plugin source. If None, the global plugin registry.
        renderer: Renderer override. If None, the openapi-generator renderer.

    Returns:
        The configured generator.
    """
    if config is None:
        config = load_docs_config()
    return CredentialOpenApiGenerator(
        plugin_manager=plugin_manager or PluginManager(),
        store=ArtifactStore(config.openapi_workdir),
        renderer=renderer or create_renderer(config),
        service_url=config.service_url,
        openapi_path=config.openapi_path,
        app_version=config.app_version,
    )
