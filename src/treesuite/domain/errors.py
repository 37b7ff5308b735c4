"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class TreesuiteError(Exception):
    """Base class for TREESUITE errors."""


# ============================================================================
#                       Package tree related errors
# ============================================================================


class InvalidPackageError(TreesuiteError, ValueError):
    """Raised when a test package mapping cannot be turned into a package tree."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Invalid test package '{path}': {reason}")
        self.path = path
        self.reason = reason


class PackageNotFoundError(TreesuiteError, LookupError):
    """Raised when a selected subpackage does not exist in the package tree."""

    def __init__(self, select: str, missing: str) -> None:
        super().__init__(
            f"Cannot select package '{select}': no subpackage named '{missing}'."
        )
        self.select = select
        self.missing = missing
