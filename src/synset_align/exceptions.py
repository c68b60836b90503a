"""Custom exceptions for synset-align."""


class SynsetAlignError(Exception):
    """Base exception for synset-align."""

    pass


class MappingUnavailableError(SynsetAlignError):
    """Raised when no supported alignment exists between two editions."""

    def __init__(self, source, target):
        super().__init__(f"No synset mapping available from {source} to {target}")
        self.source = source
        self.target = target


class ResourceError(SynsetAlignError):
    """Raised when a bundled resource is missing or cannot be read."""

    pass


class MalformedResourceError(ResourceError):
    """Raised when a bundled resource line violates its expected format."""

    def __init__(self, resource: str, line_number: int, message: str):
        super().__init__(f"{resource}:{line_number}: {message}")
        self.resource = resource
        self.line_number = line_number


class ReadOnlyTableError(SynsetAlignError):
    """Raised when mutating a table that does not accept direct mappings."""

    pass


class UnlinkedTableError(SynsetAlignError):
    """Raised when a table operation needs a reverse table that has not been linked."""

    pass


class DictionaryError(SynsetAlignError):
    """Raised when a dictionary or synset cannot be resolved."""

    pass
