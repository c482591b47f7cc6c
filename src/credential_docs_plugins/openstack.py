"""OpenStack provider plugin.

OpenStack credentials are a username/password pair scoped to a project, plus
the domains the user and the project belong to.
"""

from credential_docs_core.models import (
    CredentialDefinition,
    CredentialType,
    CredentialVariable,
    Csp,
)
from credential_docs_core.plugins import CredentialPlugin, register_plugin

OPENSTACK_VARIABLES = {
    "OS_AUTH_URL": "The auth URL of the Keystone endpoint.",
    "OS_USERNAME": "The username of the OpenStack user.",
    "OS_PASSWORD": "The password of the OpenStack user.",
    "OS_TENANT_NAME": "The name of the project the user works in.",
    "OS_USER_DOMAIN_NAME": "The domain the user belongs to.",
    "OS_PROJECT_DOMAIN_NAME": "The domain the project belongs to.",
}


def _openstack_variables() -> list[CredentialVariable]:
    return [
        CredentialVariable(
            name=name,
            description=description,
            is_sensitive=name == "OS_PASSWORD",
        )
        for name, description in OPENSTACK_VARIABLES.items()
    ]


register_plugin(
    CredentialPlugin(
        csp=Csp.OPENSTACK,
        credential_definitions=[
            CredentialDefinition(
                csp=Csp.OPENSTACK,
                type=CredentialType.VARIABLES,
                name="USERNAME_PASSWORD",
                description="Authenticate with username and password",
                variables=_openstack_variables(),
            )
        ],
    )
)
