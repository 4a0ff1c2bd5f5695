"""Failures raised by the backend clients."""


class BackendError(Exception):
    """Base class for NLU / execution request failures."""


class TransportError(BackendError):
    """The request never produced a usable HTTP response.

    Covers connection failures, timeouts and non-2xx status codes.
    """


class MalformedResponseError(BackendError):
    """The response body could not be decoded into the expected shape."""
