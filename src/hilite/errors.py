"""Exception hierarchy for hilite.

Library code raises these; only the CLI turns them into exit codes.
"""


class HiliteError(Exception):
    """Base class for all hilite errors."""


class SourceOpenError(HiliteError):
    """Raised when a source file cannot be opened for reading.

    Attributes:
        filename: The name exactly as it was given by the caller.
    """

    def __init__(self, filename: str) -> None:
        super().__init__(f"Cannot open file {filename}")
        self.filename = filename
