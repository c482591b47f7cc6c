"""Orange FlexibleEngine provider plugin."""

from credential_docs_core.models import (
    CredentialDefinition,
    CredentialType,
    CredentialVariable,
    Csp,
)
from credential_docs_core.plugins import CredentialPlugin, register_plugin

register_plugin(
    CredentialPlugin(
        csp=Csp.FLEXIBLE_ENGINE,
        credential_definitions=[
            CredentialDefinition(
                csp=Csp.FLEXIBLE_ENGINE,
                type=CredentialType.VARIABLES,
                name="AK_SK",
                description="The access key and security key.",
                variables=[
                    CredentialVariable(
                        name="OS_ACCESS_KEY", description="The access key."
                    ),
                    CredentialVariable(
                        name="OS_SECRET_KEY", description="The security key."
                    ),
                ],
            )
        ],
    )
)
