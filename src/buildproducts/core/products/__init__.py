"""Build products --- expected outputs of a build or installation.

The package is split into focused submodules:

- ``models``: The ``Product`` base and the ``LibraryProduct``,
  ``ExecutableProduct`` and ``FileProduct`` dataclasses.
- ``search``: Per-variant search algorithms and the functional
  ``locate`` / ``satisfied`` / ``variable_name`` helpers.
- ``loader``: The native load test applied to candidate libraries.
- ``declarations``: Loading products from a YAML declaration file.

All public names are re-exported here, and the ``locate`` algorithms are
attached to their classes so that ``product.locate()`` works for every
variant.
"""

from buildproducts.core.products.models import (
    ExecutableProduct,
    FileProduct,
    LibraryProduct,
    Loader,
    Product,
    guess_variable_name,
)
from buildproducts.core.products.loader import try_load

# Attach locate algorithms to the product classes
from buildproducts.core.products import search as _search

LibraryProduct.locate = _search.locate_library
ExecutableProduct.locate = _search.locate_executable
FileProduct.locate = _search.locate_file

from buildproducts.core.products.search import locate, satisfied, variable_name  # noqa: E402
from buildproducts.core.products.declarations import (  # noqa: E402
    Declarations,
    load_declarations,
    parse_declarations,
)

__all__ = [
    "Declarations",
    "ExecutableProduct",
    "FileProduct",
    "LibraryProduct",
    "Loader",
    "Product",
    "guess_variable_name",
    "load_declarations",
    "locate",
    "parse_declarations",
    "satisfied",
    "try_load",
    "variable_name",
]
