"""Built-in cloud service provider plugins.

Every public module in this package calls register_plugin(...) when imported.
Importing the package loads them all, so adding a provider only needs a new
module here.
"""

import pkgutil
from importlib import import_module

PLUGIN_MODULES = sorted(
    info.name
    for info in pkgutil.iter_modules(__path__)
    if not info.name.startswith("_")
)

for _name in PLUGIN_MODULES:
    import_module(f"{__name__}.{_name}")
