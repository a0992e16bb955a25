"""Exception hierarchy for Knotinsert."""


class KnotInsertError(Exception):
    """Base exception for all Knotinsert errors."""

    pass


class PathError(KnotInsertError):
    """Errors related to Bezier path editing."""

    pass


class InvalidHandleError(PathError):
    """A handle reference does not point at an existing handle."""

    def __init__(self, handle: object, reason: str) -> None:
        self.handle = handle
        self.reason = reason
        super().__init__(f"Invalid handle {handle!r}: {reason}")


class SessionError(KnotInsertError):
    """Errors related to loading or saving editor documents."""

    pass


class SessionLoadError(SessionError):
    """Error loading a path document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load path '{path}': {reason}")


class SessionSaveError(SessionError):
    """Error saving a path document or SVG export."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save path '{path}': {reason}")


class SessionFormatError(SessionError):
    """Unsupported or invalid document format."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid path document '{path}': {details}")
