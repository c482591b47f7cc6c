"""PyTest configuration and shared test fixtures.

This module provides fixtures and fakes shared by the unit and functional
tests: a temporary working directory, sample credential definitions, a
recording renderer and a generator wired to them.
"""

import json
import tempfile
import threading
import time
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import structlog

from credential_docs_core import plugins as plugin_registry
from credential_docs_core.artifact_store import ArtifactStore
from credential_docs_core.models import (
    CredentialDefinition,
    CredentialType,
    CredentialVariable,
    Csp,
    RenderInvocationResult,
)
from credential_docs_core.orchestrator import CredentialOpenApiGenerator
from credential_docs_core.plugins import CredentialPlugin, PluginManager
from credential_docs_core.renderer import RENDERED_INDEX_FILE


class FakeRenderer:
    """Renderer double that records calls and writes a fake index.html."""

    def __init__(
        self,
        exit_code: int = 0,
        *,
        write_index: bool = True,
        available: bool = True,
        error: Exception | None = None,
        delay: float = 0.0,
    ) -> None:
        self.exit_code = exit_code
        self.write_index = write_index
        self.available = available
        self.error = error
        self.delay = delay
        self.calls: list[tuple[Path, Path]] = []
        self.documents: list[dict[str, Any]] = []
        self._lock = threading.Lock()

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def is_available(self) -> bool:
        return self.available

    def render(self, input_json: Path, output_dir: Path) -> RenderInvocationResult:
        with self._lock:
            self.calls.append((input_json, output_dir))
            self.documents.append(json.loads(input_json.read_text(encoding="utf-8")))
        if self.delay:
            time.sleep(self.delay)
        if self.error is not None:
            raise self.error
        if self.write_index:
            title = self.documents[-1]["info"]["description"]
            (output_dir / RENDERED_INDEX_FILE).write_text(
                f"<html><body>{title}</body></html>", encoding="utf-8"
            )
        output = "" if self.exit_code == 0 else "[error] generation failed"
        return RenderInvocationResult(exit_code=self.exit_code, output=output)


def make_definition(
    csp: Csp = Csp.HUAWEI,
    credential_type: CredentialType = CredentialType.VARIABLES,
    name: str = "AK_SK",
    variables: list[CredentialVariable] | None = None,
) -> CredentialDefinition:
    """Create a credential definition for tests."""
    if variables is None:
        variables = [CredentialVariable(name="AK", description="Access Key")]
    return CredentialDefinition(
        csp=csp,
        type=credential_type,
        name=name,
        description="The access key and security key.",
        variables=variables,
    )


@pytest.fixture
def temp_dir() -> Generator[str, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield temp_dir


@pytest.fixture
def workdir(temp_dir: str) -> str:
    """Artifact working directory that doesn't exist yet."""
    return str(Path(temp_dir) / "openapi")


@pytest.fixture
def store(workdir: str) -> ArtifactStore:
    return ArtifactStore(workdir)


@pytest.fixture
def definition() -> CredentialDefinition:
    return make_definition()


@pytest.fixture
def plugin_map(definition: CredentialDefinition) -> dict[Csp, CredentialPlugin]:
    return {
        Csp.HUAWEI: CredentialPlugin(
            csp=Csp.HUAWEI, credential_definitions=[definition]
        ),
        Csp.AZURE: CredentialPlugin(csp=Csp.AZURE),
    }


@pytest.fixture
def renderer() -> FakeRenderer:
    return FakeRenderer()


@pytest.fixture
def generator_factory(
    store: ArtifactStore, plugin_map: dict[Csp, CredentialPlugin]
) -> Callable[..., CredentialOpenApiGenerator]:
    """Factory for generators sharing the test store and plugins."""

    def factory(
        renderer: Any = None,
        openapi_path: str = "docs/",
        plugins: dict[Csp, CredentialPlugin] | None = None,
        service_url: str = "https://api.example.com",
    ) -> CredentialOpenApiGenerator:
        return CredentialOpenApiGenerator(
            plugin_manager=PluginManager(plugin_map if plugins is None else plugins),
            store=store,
            renderer=renderer if renderer is not None else FakeRenderer(),
            service_url=service_url,
            openapi_path=openapi_path,
            app_version="1.2.3",
        )

    return factory


@pytest.fixture
def generator(
    generator_factory: Callable[..., CredentialOpenApiGenerator],
    renderer: FakeRenderer,
) -> CredentialOpenApiGenerator:
    return generator_factory(renderer)


@pytest.fixture
def isolated_plugin_registry() -> Generator[dict[Csp, CredentialPlugin], None, None]:
    """Snapshot the global plugin registry and restore it afterwards."""
    saved = dict(plugin_registry._PLUGINS)
    plugin_registry._PLUGINS.clear()
    try:
        yield plugin_registry._PLUGINS
    finally:
        plugin_registry._PLUGINS.clear()
        plugin_registry._PLUGINS.update(saved)


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Keep structlog configuration from leaking between tests."""
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
