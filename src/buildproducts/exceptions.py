"""buildproducts exception hierarchy.

All public exceptions inherit from BuildProductsError, giving callers a
single base class to catch when they want to handle any verification
failure without swallowing unrelated errors.

Note that a product that cannot be located is *not* an error: ``locate``
returns None and ``satisfied`` returns False. Exceptions are reserved for
misuse (bad declarations, unknown platforms) and for manifest generation,
which refuses to run against an incomplete install.
"""

from __future__ import annotations


class BuildProductsError(Exception):
    """Base exception for all buildproducts errors."""


class PlatformError(BuildProductsError):
    """Raised when a platform string or host system is not recognised."""


class ProductError(BuildProductsError, ValueError):
    """Raised when a product is constructed with invalid matching data.

    For example, a ``LibraryProduct`` with no candidate library names.
    """


class DeclarationError(BuildProductsError):
    """Raised when a product declaration file cannot be loaded.

    Covers malformed YAML, unknown product types, missing required keys
    and variable names that are not valid Python identifiers.
    """


class ManifestError(BuildProductsError):
    """Base class for failures while generating a ``deps.py`` manifest."""


class UnsatisfiedProductError(ManifestError):
    """Raised when a manifest is requested for products that are not satisfied.

    Attributes:
        products: The products that could not be located.
    """

    def __init__(self, products: list) -> None:
        self.products = list(products)
        names = ", ".join(repr(p) for p in self.products)
        super().__init__(
            f"{names} {'is' if len(self.products) == 1 else 'are'} not "
            f"satisfied, cannot generate deps file!"
        )


class DuplicateVariableError(ManifestError):
    """Raised when two products would bind the same manifest variable.

    Attributes:
        names: The variable names declared more than once.
    """

    def __init__(self, names: list[str]) -> None:
        self.names = list(names)
        super().__init__(
            "Duplicate variable name(s) in product list: "
            + ", ".join(self.names)
        )


class ReservedVariableError(ManifestError):
    """Raised when a product's variable name would shadow a manifest helper.

    Attributes:
        names: The offending variable names.
    """

    def __init__(self, names: list[str]) -> None:
        self.names = list(names)
        super().__init__(
            "Variable name(s) reserved by the generated deps file: "
            + ", ".join(self.names)
        )


class ManifestWriteError(ManifestError):
    """Raised when the manifest file cannot be opened or written."""
