"""Rendering of OpenAPI documents into browsable HTML.

The Renderer protocol is the narrow capability the orchestrator depends on,
so the external tool can be swapped or replaced by a fake in tests. The
default implementation runs openapi-generator-cli's ``html2`` generator.
"""

import subprocess
import threading
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Protocol

import structlog

from credential_docs_core.models import RenderInvocationResult

# Get logger for this module
logger = structlog.get_logger(__name__)

# File name openapi-generator writes for the html2 generator
RENDERED_INDEX_FILE = "index.html"


class Renderer(Protocol):
    """Interface for OpenAPI to HTML renderers."""

    def is_available(self) -> bool:
        """Return True when the underlying tool can be invoked."""
        ...

    def render(self, input_json: Path, output_dir: Path) -> RenderInvocationResult:
        """Render ``input_json`` into ``output_dir``.

        The renderer writes ``index.html`` into ``output_dir``; naming the
        result is left to the caller.
        """
        ...


class OpenApiGeneratorRenderer:
    """Renderer backed by the openapi-generator-cli jar."""

    def __init__(
        self,
        cli_jar: Path | str,
        launcher: Sequence[str] = ("java", "-jar"),
        provision: Callable[[], object] | None = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            cli_jar: Path of the openapi-generator-cli jar.
            launcher: Command prefix used to execute the jar.
            provision: Called once, the first time the jar is found missing,
                to fetch it.
        """
        self.cli_jar = Path(cli_jar)
        self.launcher = tuple(launcher)
        self._provision = provision
        self._provision_lock = threading.Lock()

    def is_available(self) -> bool:
        if not self.cli_jar.is_file():
            with self._provision_lock:
                provision, self._provision = self._provision, None
                if provision is not None:
                    provision()
        return self.cli_jar.is_file()

    def build_command(self, input_json: Path, output_dir: Path) -> list[str]:
        return [
            *self.launcher,
            str(self.cli_jar),
            "generate",
            "-g",
            "html2",
            "-i",
            str(input_json),
            "-o",
            str(output_dir),
        ]

    def render(self, input_json: Path, output_dir: Path) -> RenderInvocationResult:
        """Run the generator and wait for it to exit.

        stderr is merged into stdout and the pipe is drained by
        ``communicate`` before the exit status is read, so a chatty generator
        can't block on a full pipe. Output is decoded as UTF-8 with undecodable
        bytes replaced. No timeout is applied.

        Raises:
            OSError: If the launcher can't be started.
            subprocess.SubprocessError: If waiting on the process fails.
        """
        command = self.build_command(input_json, output_dir)
        logger.debug("RENDERER_COMMAND", command=command)
        with subprocess.Popen(  # noqa: S603
            command,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            encoding="utf-8",
            errors="replace",
        ) as process:
            output, _ = process.communicate()
        return RenderInvocationResult(exit_code=process.returncode, output=output or "")
