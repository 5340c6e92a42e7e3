"""Custom exceptions for the video processor."""


class TriggerValidationError(Exception):
    """Raised when a trigger notification cannot be decoded into a file event."""

    def __init__(self, reason: str, cause: Exception | None = None):
        self.reason = reason
        self.cause = cause
        super().__init__(f"Invalid trigger payload: {reason}")


class RemoteFetchError(Exception):
    """Raised when fetching a raw object from storage fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        self.cause = cause
        super().__init__(f"Failed to fetch '{object_name}' from storage")


class RemotePublishError(Exception):
    """Raised when uploading or exposing a processed object fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        self.cause = cause
        super().__init__(f"Failed to publish '{object_name}' to storage")


class TranscodeError(Exception):
    """Raised when the transcode engine reports a failure."""

    def __init__(self, file_name: str, diagnostic: str, cause: Exception | None = None):
        self.file_name = file_name
        self.diagnostic = diagnostic
        self.cause = cause
        super().__init__(f"Failed to transcode '{file_name}': {diagnostic}")


class ScratchIOError(Exception):
    """Raised when a local scratch file operation fails."""

    def __init__(self, path: str, cause: Exception | None = None):
        self.path = path
        self.cause = cause
        super().__init__(f"Local file operation failed for '{path}'")
