"""Microsoft Azure provider plugin.

The Azure integration doesn't declare credential definitions yet.
"""

from credential_docs_core.models import Csp
from credential_docs_core.plugins import CredentialPlugin, register_plugin

register_plugin(CredentialPlugin(csp=Csp.AZURE))
