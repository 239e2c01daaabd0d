# tracker_app/exceptions.py
"""
Failures raised by the service layer.

Views translate these into HTTP status codes: InvalidArgument and
NullArgument become 400, InvalidOperation becomes 404. A missing row on
update or delete is not wrapped; the ORM's ObjectDoesNotExist propagates
as-is and is mapped to 404 by the views as well.
"""

ID_GREATER_THAN_ZERO_MESSAGE = 'Invalid argument exception. Id value must be greater than 0.'


class TrackerError(Exception):
    """Base class for service layer failures."""


class InvalidArgument(TrackerError, ValueError):
    """A bad id or a payload that failed validation."""

    def __init__(self, message=ID_GREATER_THAN_ZERO_MESSAGE, detail=None):
        super().__init__(message)
        # Field errors from a serializer, when the failure came from validation
        self.detail = detail


class NullArgument(InvalidArgument):
    """A required payload was not supplied."""

    def __init__(self, name):
        super().__init__(f"Argument '{name}' is null.")


class InvalidOperation(TrackerError):
    """The requested change would break a relationship between entities."""
