"""Management of the openapi-generator-cli jar.

The jar is looked up in the working directory and downloaded from a Maven
repository the first time it is needed.
"""

from dataclasses import dataclass
from pathlib import Path

import httpx
import structlog

from credential_docs_core.exceptions import GeneratorDownloadError

# Get logger for this module
logger = structlog.get_logger(__name__)

DEFAULT_GENERATOR_VERSION = "6.6.0"
DEFAULT_DOWNLOAD_URL = (
    "https://repo1.maven.org/maven2/org/openapitools/openapi-generator-cli"
)


@dataclass
class OpenApiGeneratorJar:
    """Location and provenance of the openapi-generator-cli jar."""

    workdir: str
    version: str = DEFAULT_GENERATOR_VERSION
    download_url: str = DEFAULT_DOWNLOAD_URL
    jar_path: str | None = None
    timeout: float = 60.0

    @property
    def jar_name(self) -> str:
        return f"openapi-generator-cli-{self.version}.jar"

    @property
    def cli_file(self) -> Path:
        if self.jar_path:
            return Path(self.jar_path)
        return Path(self.workdir) / self.jar_name

    @property
    def remote_url(self) -> str:
        return f"{self.download_url.rstrip('/')}/{self.version}/{self.jar_name}"

    def ensure(self, client: httpx.Client | None = None) -> Path:
        """Return the jar path, downloading the jar if it is missing.

        Args:
            client: Optional HTTP client, mainly for tests.

        Returns:
            Path of the jar on disk.

        Raises:
            GeneratorDownloadError: If the download fails.
        """
        target = self.cli_file
        if target.is_file():
            return target

        url = self.remote_url
        target.parent.mkdir(parents=True, exist_ok=True)
        partial = target.with_name(f"{target.name}.part")
        logger.info("GENERATOR_JAR_DOWNLOAD_STARTED", url=url, target=str(target))

        owns_client = client is None
        http = client or httpx.Client(timeout=self.timeout, follow_redirects=True)
        try:
            with http.stream("GET", url) as response:
                response.raise_for_status()
                with partial.open("wb") as out:
                    for chunk in response.iter_bytes():
                        out.write(chunk)
            partial.replace(target)
        except (httpx.HTTPError, OSError) as e:
            partial.unlink(missing_ok=True)
            logger.exception("GENERATOR_JAR_DOWNLOAD_FAILED", url=url, error=str(e))
            raise GeneratorDownloadError(
                f"Failed to download openapi-generator-cli from {url}: {e}", url
            ) from e
        finally:
            if owns_client:
                http.close()

        logger.info("GENERATOR_JAR_DOWNLOAD_COMPLETED", target=str(target))
        return target
