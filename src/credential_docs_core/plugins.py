"""Provider plugin registry.

This module manages the registry of cloud service provider plugins and the
credential definitions each of them declares. Plugin modules register themselves
when imported.
"""

from collections.abc import Mapping
from dataclasses import dataclass

import structlog

from credential_docs_core.exceptions import PluginNotFoundError
from credential_docs_core.models import CredentialDefinition, CredentialType, Csp

# Get logger for this module
logger = structlog.get_logger(__name__)


@dataclass
class CredentialPlugin:
    """A provider integration and the credential shapes it accepts.

    ``credential_definitions`` is None for providers that don't declare any.
    """

    csp: Csp
    credential_definitions: list[CredentialDefinition] | None = None

    def find_definition(
        self, credential_type: CredentialType
    ) -> CredentialDefinition | None:
        """Return the first definition of the given type, if any."""
        for definition in self.credential_definitions or []:
            if definition is not None and definition.type == credential_type:
                return definition
        return None

    def definitions_by_type(self) -> dict[CredentialType, CredentialDefinition]:
        """Index definitions by type; the first occurrence of a type wins."""
        by_type: dict[CredentialType, CredentialDefinition] = {}
        for definition in self.credential_definitions or []:
            if definition is None:
                continue
            by_type.setdefault(definition.type, definition)
        return by_type


# Plugin registry
_PLUGINS: dict[Csp, CredentialPlugin] = {}


def register_plugin(plugin: CredentialPlugin) -> None:
    """Register a provider plugin, replacing any earlier one for its csp."""
    if plugin.csp in _PLUGINS:
        logger.warning("PLUGIN_REPLACED", csp=str(plugin.csp))
    _PLUGINS[plugin.csp] = plugin


def list_plugins() -> list[Csp]:
    """List all registered providers."""
    return list(_PLUGINS.keys())


class PluginManager:
    """Read access to a set of provider plugins.

    By default the manager reads the module registry; tests and embedders can
    pass their own mapping instead.
    """

    def __init__(self, plugins: Mapping[Csp, CredentialPlugin] | None = None) -> None:
        self._plugins = plugins

    @property
    def plugins(self) -> Mapping[Csp, CredentialPlugin]:
        return _PLUGINS if self._plugins is None else self._plugins

    def get_plugins_map(self) -> dict[Csp, CredentialPlugin]:
        return dict(self.plugins)

    def get_plugin(self, csp: Csp) -> CredentialPlugin:
        """Get the plugin for a provider.

        Raises:
            PluginNotFoundError: If no plugin is registered for the provider.
        """
        plugin = self.plugins.get(csp)
        if plugin is None:
            raise PluginNotFoundError(str(csp))
        return plugin
