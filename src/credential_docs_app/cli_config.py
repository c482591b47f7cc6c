"""CLI configuration using environ-config.

Options are read from ``CREDENTIAL_DOCS_*`` environment variables. Command line
``--option value`` arguments override the matching variable, so
``--service-url https://x`` is equivalent to
``CREDENTIAL_DOCS_SERVICE_URL=https://x``.
"""

import os
from collections.abc import Mapping
from typing import TypeVar

import environ

from credential_docs_core.config_factory import ENV_PREFIX, DocsConfig

T = TypeVar("T")


@environ.config(prefix=ENV_PREFIX)
class RunConfig:
    """Configuration for the generate, url and list commands."""

    log_level: str = environ.var(default="INFO", help="Log level")
    dev_mode: bool = environ.bool_var(
        default=False, help="Enable development mode logging"
    )


@environ.config(prefix=ENV_PREFIX)
class ServeConfig:
    """Configuration for the serve command."""

    port: int = environ.var(default=8080, converter=int, help="Port to bind to")
    host: str = environ.var(default="127.0.0.1", help="Host to bind to")
    log_level: str = environ.var(default="INFO", help="Log level")
    dev_mode: bool = environ.bool_var(
        default=False, help="Enable development mode logging"
    )


class UnknownOptionError(ValueError):
    """Raised when a command line argument isn't a ``--option``."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"Unexpected argument: {argument}")
        self.argument = argument


def args_to_environ(
    args: list[str] | None, env: Mapping[str, str] | None = None
) -> dict[str, str]:
    """Overlay ``--option value`` arguments onto an environment mapping.

    A trailing option, or one followed by another option, is a boolean flag
    and is set to "true".

    Args:
        args: Command line arguments after the command name.
        env: Base environment. If None, uses os.environ.

    Returns:
        A new mapping with the overrides applied.

    Raises:
        UnknownOptionError: If an argument isn't an option or option value.
    """
    merged = dict(os.environ if env is None else env)
    remaining = list(args or [])
    while remaining:
        argument = remaining.pop(0)
        if not argument.startswith("--"):
            raise UnknownOptionError(argument)
        name, sep, value = argument[2:].partition("=")
        if not sep:
            if remaining and not remaining[0].startswith("--"):
                value = remaining.pop(0)
            else:
                value = "true"
        merged[f"{ENV_PREFIX}_{name.replace('-', '_').upper()}"] = value
    return merged


def args_to_config_class(
    config_cls: type[T], args: list[str] | None, env: Mapping[str, str] | None = None
) -> T:
    """Build an environ-config class from arguments and environment variables."""
    return environ.to_config(config_cls, environ=args_to_environ(args, env))


def create_run_config(args: list[str] | None = None) -> RunConfig:
    return args_to_config_class(RunConfig, args)


def create_serve_config(args: list[str] | None = None) -> ServeConfig:
    return args_to_config_class(ServeConfig, args)


def create_docs_config(args: list[str] | None = None) -> DocsConfig:
    """Create the generator DocsConfig from arguments and environment variables."""
    return args_to_config_class(DocsConfig, args)
