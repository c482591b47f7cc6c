"""Command-line interface and main entry point.

This module provides the CLI for generating credential API documentation,
resolving documentation URLs and serving the rendered pages.
"""
# ruff: noqa: T201

import sys
from typing import Any, cast
from wsgiref.simple_server import make_server

import structlog

# Import plugins to ensure they are registered
import credential_docs_plugins  # noqa: F401
from credential_docs_app.cli_config import (
    create_docs_config,
    create_run_config,
    create_serve_config,
)
from credential_docs_app.web import create_docs_app
from credential_docs_core.config_factory import create_credential_openapi_generator
from credential_docs_core.exceptions import CredentialDocsError
from credential_docs_core.models import CredentialType, Csp
from credential_docs_core.observability import (
    configure_logging,
    log_bind,
    observe_around,
)
from credential_docs_core.plugins import PluginManager, list_plugins

# Get logger for this module
logger = structlog.get_logger(__name__)

VERSION = "0.1.0"


def generate_command(args: list[str] | None = None) -> None:
    """Generate the documentation for every registered credential type.

    Args:
        args: Command line options.
    """
    try:
        config = create_run_config(args)
        configure_logging(log_level=config.log_level, dev_mode=config.dev_mode)

        generator = create_credential_openapi_generator(create_docs_config(args))
        with log_bind(command="generate"), observe_around(
            logger, "CREDENTIAL_API_GENERATION"
        ):
            failed = generator.generate_all()
        if failed:
            print(f"Failed: {', '.join(str(key) for key in failed)}")
            sys.exit(1)

    except (CredentialDocsError, ValueError) as e:
        logger.exception("GENERATE_COMMAND_ERROR", error=str(e))
        sys.exit(1)


def url_command(args: list[str] | None = None) -> None:
    """Print the documentation URL for a provider and credential type.

    Args:
        args: ``<csp> <type>`` followed by command line options.
    """
    min_args = 2
    if not args or len(args) < min_args:
        print("Error: url requires <csp> <type>")
        sys.exit(1)

    try:
        csp = Csp(args[0])
        credential_type = CredentialType(args[1])
    except ValueError as e:
        print(f"Error: {e!s}")
        sys.exit(1)

    options = args[min_args:]
    try:
        config = create_run_config(options)
        configure_logging(log_level=config.log_level, dev_mode=config.dev_mode)

        generator = create_credential_openapi_generator(create_docs_config(options))
        with log_bind(csp=str(csp), type=str(credential_type)):
            print(generator.get_credential_openapi_url(csp, credential_type))

    except (CredentialDocsError, ValueError) as e:
        print(f"Error: {e!s}")
        sys.exit(1)


def list_command(args: list[str] | None = None) -> None:
    """List registered providers and the credential types they declare."""
    try:
        config = create_run_config(args)
        configure_logging(log_level=config.log_level, dev_mode=config.dev_mode)
    except ValueError as e:
        print(f"Error: {e!s}")
        sys.exit(1)

    providers = list_plugins()
    if not providers:
        print("No provider plugins are available.")
        return

    manager = PluginManager()
    print("Available credential types:")
    for csp in sorted(providers, key=str):
        types = list(manager.get_plugin(csp).definitions_by_type())
        print(f"  {csp}: {', '.join(str(t) for t in types) or '-'}")
    print(f"Total: {len(providers)} provider(s)")


def serve_command(args: list[str] | None = None) -> None:
    """Generate all documentation, then serve it over HTTP.

    Args:
        args: Command line options.
    """
    try:
        config = create_serve_config(args)
        configure_logging(log_level=config.log_level, dev_mode=config.dev_mode)

        generator = create_credential_openapi_generator(create_docs_config(args))
        with observe_around(logger, "STARTUP_CREDENTIAL_API_GENERATION"):
            generator.on_startup()

        app = create_docs_app(generator)
        with make_server(config.host, config.port, cast("Any", app)) as httpd:
            logger.info("DOCS_SERVER_STARTED", host=config.host, port=config.port)
            httpd.serve_forever()

    except KeyboardInterrupt:
        logger.info("DOCS_SERVER_STOPPED_BY_USER")
    except (CredentialDocsError, ValueError, OSError) as e:
        print(f"Error: {e!s}")
        logger.exception("DOCS_SERVER_START_ERROR", error=str(e))
        sys.exit(1)


def show_help() -> None:
    """Show help information for the CLI."""
    help_text = """
Credential API Documentation Generator

Usage:
    credential-docs <command> [options]

Commands:
    generate            Generate documentation for all registered credential types
    url <csp> <type>    Print the documentation URL, generating the page if needed
    list                List registered providers and credential types
    serve               Generate all documentation and serve it over HTTP
    --help, -h          Show this help message
    --version, -v       Show version information

Options (also read from CREDENTIAL_DOCS_<OPTION> environment variables):
    --service-url <url>          Base URL of the service
    --openapi-workdir <dir>      Working directory for generated artifacts
    --openapi-path <path>        Relative path pages are served under
    --generator-jar <path>       openapi-generator-cli jar to use
    --java-command <cmd>         JVM launcher
    --log-level <level>          Log level (DEBUG, INFO, WARNING, ERROR)
    --dev-mode                   Enable development mode
    --host <host> --port <port>  Bind address for serve

Examples:
    credential-docs generate --dev-mode
    credential-docs url huawei variables
    credential-docs serve --port 8080
"""
    print(help_text)


def main() -> None:
    """Main entry point for the CLI."""
    min_args = 2
    if len(sys.argv) < min_args:
        show_help()
        sys.exit(1)

    command = sys.argv[1]
    args = sys.argv[2:]

    if command == "generate":
        generate_command(args)
    elif command == "url":
        url_command(args)
    elif command == "list":
        list_command(args)
    elif command == "serve":
        serve_command(args)
    elif command in ["--help", "-h", "help"]:
        show_help()
        sys.exit(0)
    elif command in ["--version", "-v", "version"]:
        print(f"credential-api-docs, version {VERSION}")
        sys.exit(0)
    else:
        show_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
