"""Huawei Cloud provider plugin."""

from credential_docs_core.models import (
    CredentialDefinition,
    CredentialType,
    CredentialVariable,
    Csp,
)
from credential_docs_core.plugins import CredentialPlugin, register_plugin


def _huawei_credential_definitions() -> list[CredentialDefinition]:
    return [
        CredentialDefinition(
            csp=Csp.HUAWEI,
            type=CredentialType.VARIABLES,
            name="AK_SK",
            description="The access key and security key.",
            variables=[
                CredentialVariable(
                    name="HW_ACCESS_KEY",
                    description="The access key.",
                ),
                CredentialVariable(
                    name="HW_SECRET_KEY",
                    description="The security key.",
                ),
            ],
        )
    ]


# Register the plugin
register_plugin(
    CredentialPlugin(
        csp=Csp.HUAWEI, credential_definitions=_huawei_credential_definitions()
    )
)
