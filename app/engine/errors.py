"""Error kinds signalled by the analytics engine. The engine never logs them."""


class AnalyticsError(Exception):
    """Base class; carries the code and HTTP status the transport maps it to."""

    code = "ANALYTICS_ERROR"
    http_status = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidMonth(AnalyticsError):
    """Caller-supplied month is missing, non-numeric, or outside 1-12."""

    code = "INVALID_MONTH"
    http_status = 400

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"A valid month (1-12) is required, got {value!r}")


class StoreUnavailable(AnalyticsError):
    """The record store could not produce a snapshot."""

    code = "STORE_UNAVAILABLE"
    http_status = 503
