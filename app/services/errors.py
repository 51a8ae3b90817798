"""
Registry error taxonomy.

Every rejected registry operation raises exactly one of these. Each kind
carries a stable numeric code and the HTTP status the API answers with.
"""


class RegistryError(Exception):
    """Base class for all registry failures"""

    code = 0
    kind = "RegistryError"
    status_code = 400
    default_message = "Registry operation failed"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class NotAuthorized(RegistryError):
    code = 100
    kind = "NotAuthorized"
    status_code = 403
    default_message = "Caller is not authorized for this action"


class NotTokenOwner(RegistryError):
    code = 101
    kind = "NotTokenOwner"
    status_code = 403
    default_message = "Sender does not own this token"


class EventNotFound(RegistryError):
    code = 102
    kind = "EventNotFound"
    status_code = 404
    default_message = "Event not found"


class EventClosed(RegistryError):
    code = 103
    kind = "EventClosed"
    status_code = 409
    default_message = "Event is closed"


class AlreadyAttended(RegistryError):
    code = 104
    kind = "AlreadyAttended"
    status_code = 409
    default_message = "Attendee already holds a token for this event"


class MaxAttendeesReached(RegistryError):
    code = 105
    kind = "MaxAttendeesReached"
    status_code = 409
    default_message = "Event has reached its maximum number of attendees"


class InvalidEventData(RegistryError):
    code = 106
    kind = "InvalidEventData"
    status_code = 422
    default_message = "Invalid event data"
