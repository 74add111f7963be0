"""Error types raised by the application store and collaborators."""


class TrackerError(Exception):
    """Base class for job tracker errors"""
    pass


class ValidationError(TrackerError):
    """Raised when a field is missing, empty or holds an invalid value"""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


class NotFoundError(TrackerError):
    """Raised when no application matches the requested id"""

    def __init__(self, application_id):
        super().__init__(f"Application {application_id} not found")
        self.application_id = application_id


class StorageError(TrackerError):
    """Raised when the backing store is unreachable or rejects an operation"""
    pass


class BulletGenerationError(TrackerError):
    """Raised when the text-completion service cannot produce bullets"""
    pass
