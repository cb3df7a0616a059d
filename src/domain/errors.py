"""
Domain exceptions for the function extraction workflow.
Only the process-files use case converts these into ProcessingResult values.
"""


class FunctionExtractorError(Exception):
    """Base class for all workflow errors."""


class MissingRequiredInputError(FunctionExtractorError, ValueError):
    """The HTML document was not supplied."""


class DigestPathMismatchError(FunctionExtractorError, RuntimeError):
    """The rewritten HTML references script paths that are not in the archive."""

    def __init__(self, missing_paths: list[str]) -> None:
        self.missing_paths = missing_paths
        super().__init__(
            "Rewritten HTML references paths missing from the archive: "
            + ", ".join(missing_paths)
        )
