"""Standardized exceptions for the credential documentation core module.

This module provides consistent exception types and error handling patterns
across the documentation generation pipeline.
"""


class CredentialDocsError(Exception):
    """Base exception for all credential documentation errors."""

    def __init__(self, message: str, error_code: str | None = None) -> None:
        """Initialize the error with a message and optional error code.

        Args:
            message: Human-readable error message.
            error_code: Optional error code for programmatic handling.
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class ConfigurationError(CredentialDocsError):
    """Raised when there are configuration-related errors."""

    def __init__(self, message: str, component: str | None = None) -> None:
        """Initialize configuration error.

        Args:
            message: Error message describing the configuration issue.
            component: Optional component name where the error occurred.
        """
        super().__init__(message, "CONFIG_ERROR")
        self.component = component


class PluginNotFoundError(ConfigurationError):
    """Raised when no plugin is registered for a cloud service provider."""

    def __init__(self, csp: str) -> None:
        """Initialize the error for the missing provider.

        Args:
            csp: The cloud service provider that has no plugin.
        """
        super().__init__(
            f"Can't find suitable plugin for the cloud service provider {csp}",
            "plugin_registry",
        )
        self.csp = csp


class NoCredentialDefinitionAvailableError(CredentialDocsError):
    """Raised when a provider has no credential definition of a given type."""

    def __init__(self, csp: str, credential_type: str) -> None:
        """Initialize the error naming both identifiers.

        Args:
            csp: The cloud service provider that was looked up.
            credential_type: The credential type that was requested.
        """
        super().__init__(
            f"Not found credential definition with type {credential_type} "
            f"of the cloud service provider {csp}",
            "NO_CREDENTIAL_DEFINITION",
        )
        self.csp = csp
        self.credential_type = credential_type


class OpenApiFileGenerationError(CredentialDocsError):
    """Raised when a documentation artifact can't be produced."""

    def __init__(self, message: str, file_name: str | None = None) -> None:
        """Initialize generation error.

        Args:
            message: Error message describing the generation failure.
            file_name: Optional name of the artifact that failed.
        """
        super().__init__(message, "OPENAPI_GENERATION_ERROR")
        self.file_name = file_name


class GeneratorDownloadError(CredentialDocsError):
    """Raised when the openapi-generator-cli jar can't be downloaded."""

    def __init__(self, message: str, url: str | None = None) -> None:
        """Initialize download error.

        Args:
            message: Error message describing the download failure.
            url: Optional URL that was being downloaded.
        """
        super().__init__(message, "GENERATOR_DOWNLOAD_ERROR")
        self.url = url
