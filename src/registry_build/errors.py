"""Exceptions raised by registry-build operations."""


class RegistryDescriptorError(ValueError):
    """The top-level registry descriptor is missing, malformed, or has no items.

    Fatal: the CLI error boundary reports it and exits with status 1.
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to read {path}: {reason}")
        self.path = path
        self.reason = reason
