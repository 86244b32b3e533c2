"""Error taxonomy for symbol resolution requests."""


class SymbolOpenerError(Exception):
    """Base class for errors surfaced to the user as a single message."""


class InvalidKindNameError(SymbolOpenerError):
    """A configured or requested kind name is not part of the kind vocabulary."""

    def __init__(self, name: str, source: str = "symbolSortPriority") -> None:
        """Record the offending name and where it came from."""
        super().__init__(f'Invalid SymbolKind in {source}: "{name}"')
        self.name = name
        self.source = source


class UnknownKindError(InvalidKindNameError):
    """Lookup of a single kind name failed."""

    def __init__(self, name: str) -> None:
        """Record the unknown kind name."""
        super().__init__(name, source="kind")


class MissingRequiredInputError(SymbolOpenerError):
    """A request lacks the symbol name or the project path."""

    def __init__(self) -> None:
        """Build the fixed user-facing message."""
        super().__init__("Symbol Opener: Missing required parameters (symbol, cwd)")


class ProjectNotOpenError(SymbolOpenerError):
    """The target project is not open and the policy forbids a handoff."""

    def __init__(self, project_path: str) -> None:
        """Record the project path the request targeted."""
        super().__init__(f'Workspace "{project_path}" is not open. Please open it first.')
        self.project_path = project_path


class IndexQueryError(SymbolOpenerError):
    """The index or host failed in a way that is not an empty result."""


class ConfigError(SymbolOpenerError):
    """A configuration value is invalid."""
