"""Artifact naming scheme for generated credential documentation."""

from credential_docs_core.models import Csp, CredentialType

JSON_SUFFIX = ".json"
HTML_SUFFIX = ".html"


def credential_api_file_name(
    csp: Csp | str, credential_type: CredentialType | str, suffix: str = ""
) -> str:
    """Return the artifact file name for a provider and credential type.

    Both identifiers come from closed enumerations, so names never collide
    across providers, types or suffixes.

    Args:
        csp: The cloud service provider.
        credential_type: The credential type.
        suffix: File suffix including the leading dot, e.g. ".html".

    Returns:
        ``<csp>_<type>_credentialApi<suffix>``
    """
    return f"{csp}_{credential_type}_credentialApi{suffix}"
