"""Errors raised at the upstream fetch boundary."""


class UpstreamError(Exception):
    """Base class for failures talking to the models API."""

    error_code = "UPSTREAM_ERROR"


class UpstreamUnreachableError(UpstreamError):
    """Network-level failure: DNS, connection refused, reset, timeout."""

    error_code = "UPSTREAM_UNREACHABLE"


class UpstreamBadStatusError(UpstreamError):
    """The models API answered with a non-2xx status."""

    error_code = "UPSTREAM_BAD_STATUS"

    def __init__(self, status_code: int, reason: str = ""):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"OpenRouter API error: {status_code} {reason}".strip())


class UpstreamMalformedError(UpstreamError):
    """The response body is not JSON or does not match the expected shape."""

    error_code = "UPSTREAM_MALFORMED"
