"""
Exception hierarchy for the Flomo importer.

Every stage raises one of these so callers can tell a bad input apart from a
broken archive or a failed vault write without inspecting internal logs.
"""


class FlomoImportError(Exception):
    """Base class for all import failures."""


class InvalidInputError(FlomoImportError):
    """The archive path or the import settings are unusable."""


class ExtractionError(FlomoImportError):
    """The archive is corrupt or contains no entries."""


class MissingDocumentError(FlomoImportError):
    """No primary HTML document could be found in the extracted archive."""


class WriteError(FlomoImportError):
    """Writing to the destination vault failed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write {path}: {reason}")


class RelocationError(FlomoImportError):
    """Copying the attachment subtree into the vault failed."""
