"""Domain-layer error definitions."""

# ============================================================================
#                           General errors
# ============================================================================


class CSLError(Exception):
    """Base class for all CSLMATCH errors."""


# ============================================================================
#                   Package declaration command errors
# ============================================================================


class CommandError(CSLError):
    """Base class for a declaration command that could not be applied.

    Command errors never escape the package parser: they are reported as parse
    diagnostics and parsing continues with the next line. A `suppressed` error
    still fails its command but is not reported again.
    """

    def __init__(self, keyword: str, message: str, *, suppressed: bool = False) -> None:
        super().__init__(message)
        self.keyword = keyword
        self.message = message
        self.suppressed = suppressed


class MalformedCommandError(CommandError):
    """Raised when a command has the wrong argument count or shape."""


class UnresolvedReferenceError(CommandError):
    """Raised when a path's package prefix or a named package cannot be found."""


class MissingDependencyError(UnresolvedReferenceError):
    """Raised when a DEPENDENCY names a package absent from the catalog."""

    def __init__(self, keyword: str, dependency: str) -> None:
        super().__init__(keyword, f"required package {dependency} not found.")
        self.dependency = dependency


class SequencingError(CommandError):
    """Raised when a command needs a preceding declaration that is absent."""


# ============================================================================
#                   Catalog load errors
# ============================================================================


class DuplicatePackageNameError(CSLError):
    """Raised when a package exports a name already used by another package."""

    def __init__(self, name: str, existing_path: str, requested_path: str) -> None:
        super().__init__(
            f"Package name {name} already in use by {existing_path} "
            f"requested by use by {requested_path}"
        )
        self.name = name
        self.existing_path = existing_path
        self.requested_path = requested_path


class ReferenceDocumentError(CSLError):
    """Raised when a reference document (Doc 8643, related.txt) cannot be read."""

    def __init__(self, kind: str, path: str) -> None:
        super().__init__(f"could not open {kind} at {path}")
        self.kind = kind
        self.path = path
