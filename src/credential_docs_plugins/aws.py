"""Amazon Web Services provider plugin."""

from credential_docs_core.models import (
    CredentialDefinition,
    CredentialType,
    CredentialVariable,
    Csp,
)
from credential_docs_core.plugins import CredentialPlugin, register_plugin

register_plugin(
    CredentialPlugin(
        csp=Csp.AWS,
        credential_definitions=[
            CredentialDefinition(
                csp=Csp.AWS,
                type=CredentialType.VARIABLES,
                name="AK_SK",
                description="The access key and secret key of an IAM user.",
                variables=[
                    CredentialVariable(
                        name="AWS_ACCESS_KEY_ID",
                        description="The access key ID of the IAM user.",
                    ),
                    CredentialVariable(
                        name="AWS_SECRET_ACCESS_KEY",
                        description="The secret access key of the IAM user.",
                    ),
                ],
            )
        ],
    )
)
