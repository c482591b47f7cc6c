"""Unit tests for the provider plugin registry."""

import pytest
from conftest import make_definition

from credential_docs_core.exceptions import ConfigurationError, PluginNotFoundError
from credential_docs_core.models import CredentialType, Csp
from credential_docs_core.plugins import (
    CredentialPlugin,
    PluginManager,
    list_plugins,
    register_plugin,
)


class TestCredentialPlugin:
    """Test CredentialPlugin lookups."""

    def test_find_definition(self) -> None:
        api_key = make_definition(credential_type=CredentialType.API_KEY)
        plugin = CredentialPlugin(
            csp=Csp.HUAWEI, credential_definitions=[make_definition(), api_key]
        )
        assert plugin.find_definition(CredentialType.API_KEY) is api_key
        assert plugin.find_definition(CredentialType.OAUTH2) is None

    def test_find_definition_without_definitions(self) -> None:
        plugin = CredentialPlugin(csp=Csp.AZURE)
        assert plugin.find_definition(CredentialType.VARIABLES) is None
        assert plugin.definitions_by_type() == {}

    def test_definitions_by_type_first_wins(self) -> None:
        first = make_definition(name="FIRST")
        plugin = CredentialPlugin(
            csp=Csp.HUAWEI,
            credential_definitions=[first, None, make_definition(name="SECOND")],  # type: ignore[list-item]
        )
        assert plugin.definitions_by_type() == {CredentialType.VARIABLES: first}


class TestRegistry:
    """Test the module-level plugin registry."""

    def test_register_and_list(self, isolated_plugin_registry: dict) -> None:
        register_plugin(CredentialPlugin(csp=Csp.HUAWEI))
        register_plugin(CredentialPlugin(csp=Csp.AWS))
        assert list_plugins() == [Csp.HUAWEI, Csp.AWS]

    def test_register_replaces(self, isolated_plugin_registry: dict) -> None:
        replacement = CredentialPlugin(
            csp=Csp.HUAWEI, credential_definitions=[make_definition()]
        )
        register_plugin(CredentialPlugin(csp=Csp.HUAWEI))
        register_plugin(replacement)
        assert PluginManager().get_plugin(Csp.HUAWEI) is replacement


class TestPluginManager:
    """Test PluginManager."""

    def test_explicit_mapping(self) -> None:
        plugin = CredentialPlugin(csp=Csp.OPENSTACK)
        manager = PluginManager({Csp.OPENSTACK: plugin})
        assert manager.get_plugin(Csp.OPENSTACK) is plugin
        assert manager.get_plugins_map() == {Csp.OPENSTACK: plugin}

    def test_plugins_map_is_a_copy(self) -> None:
        plugins = {Csp.OPENSTACK: CredentialPlugin(csp=Csp.OPENSTACK)}
        manager = PluginManager(plugins)
        manager.get_plugins_map().clear()
        assert Csp.OPENSTACK in manager.plugins

    def test_unknown_provider(self) -> None:
        with pytest.raises(PluginNotFoundError) as exc_info:
            PluginManager({}).get_plugin(Csp.ALICLOUD)
        assert isinstance(exc_info.value, ConfigurationError)
        assert exc_info.value.csp == "alicloud"
