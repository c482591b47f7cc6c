"""Tests for the built-in provider plugins."""

import importlib

import pytest

import credential_docs_plugins
from credential_docs_core.models import CredentialType, Csp
from credential_docs_core.plugins import PluginManager
from credential_docs_core.synthesizer import build_openapi_document


@pytest.fixture
def builtin_plugins(isolated_plugin_registry: dict) -> PluginManager:
    """Register the built-in plugins into an empty registry."""
    for name in credential_docs_plugins.PLUGIN_MODULES:
        importlib.reload(importlib.import_module(f"credential_docs_plugins.{name}"))
    return PluginManager()


class TestBuiltinPlugins:
    """Test the plugins shipped with the package."""

    def test_modules_discovered(self) -> None:
        assert credential_docs_plugins.PLUGIN_MODULES == [
            "aws",
            "azure",
            "flexible_engine",
            "huawei",
            "openstack",
        ]

    def test_registered_providers(self, builtin_plugins: PluginManager) -> None:
        assert set(builtin_plugins.get_plugins_map()) == {
            Csp.AWS,
            Csp.AZURE,
            Csp.FLEXIBLE_ENGINE,
            Csp.HUAWEI,
            Csp.OPENSTACK,
        }

    @pytest.mark.parametrize(
        ("csp", "name", "variables"),
        [
            (Csp.HUAWEI, "AK_SK", ["HW_ACCESS_KEY", "HW_SECRET_KEY"]),
            (Csp.FLEXIBLE_ENGINE, "AK_SK", ["OS_ACCESS_KEY", "OS_SECRET_KEY"]),
            (Csp.AWS, "AK_SK", ["AWS_ACCESS_KEY_ID", "AWS_SECRET_ACCESS_KEY"]),
        ],
    )
    def test_access_key_providers(
        self,
        builtin_plugins: PluginManager,
        csp: Csp,
        name: str,
        variables: list[str],
    ) -> None:
        definition = builtin_plugins.get_plugin(csp).find_definition(
            CredentialType.VARIABLES
        )
        assert definition is not None
        assert definition.csp == csp
        assert definition.name == name
        assert [variable.name for variable in definition.variables] == variables

    def test_openstack(self, builtin_plugins: PluginManager) -> None:
        definition = builtin_plugins.get_plugin(Csp.OPENSTACK).find_definition(
            CredentialType.VARIABLES
        )
        assert definition is not None
        assert definition.name == "USERNAME_PASSWORD"
        sensitive = [v.name for v in definition.variables if v.is_sensitive]
        assert sensitive == ["OS_PASSWORD"]

    def test_azure_declares_nothing(self, builtin_plugins: PluginManager) -> None:
        plugin = builtin_plugins.get_plugin(Csp.AZURE)
        assert plugin.credential_definitions is None

    def test_documents_use_provider_names(self, builtin_plugins: PluginManager) -> None:
        definition = builtin_plugins.get_plugin(Csp.FLEXIBLE_ENGINE).find_definition(
            CredentialType.VARIABLES
        )
        assert definition is not None
        document = build_openapi_document(definition, "http://localhost", "1.0.0")
        create = document["components"]["schemas"]["CreateCredential"]
        assert create["properties"]["csp"]["example"] == "flexibleEngine"
        assert create["properties"]["variables"]["example"] == [
            {
                "name": "OS_ACCESS_KEY",
                "description": "The access key.",
                "value": "The access key.",
            },
            {
                "name": "OS_SECRET_KEY",
                "description": "The security key.",
                "value": "The security key.",
            },
        ]
