"""
Custom exceptions for the LLM client layer.

These exceptions let the API layer distinguish between failure modes of the
single completion call. None of them is retried: a failed call surfaces
immediately to the caller as a service failure.
"""


class LLMClientError(Exception):
    """
    Base exception for all LLM client errors.
    
    All LLM-specific exceptions inherit from this to allow catching
    any LLM-related error with a single except clause.
    """
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class TransportError(LLMClientError):
    """
    Raised when the network call itself cannot complete.
    
    Includes DNS failures, refused connections and broken streams.
    """
    pass


class UpstreamTimeoutError(TransportError):
    """
    Raised when the completion call exceeds the configured timeout.
    
    Separate from generic transport errors so it can map to 504.
    """
    pass


class UpstreamStatusError(LLMClientError):
    """
    Raised when the provider answers with a non-success HTTP status.
    
    Carries the status code and raw response body for diagnostics.
    """
    def __init__(self, status_code: int, body: str):
        super().__init__(
            f"response error {status_code}: {body}",
            details={"status_code": status_code, "body": body[:1000]},
        )
        self.status_code = status_code
        self.body = body


class EmptyChoicesError(LLMClientError):
    """Raised when a successful response carries no completion choice."""
    pass


class MalformedResponseError(LLMClientError):
    """
    Raised when a successful response body is not a completion response.
    
    Examples:
    - Body is not JSON
    - ``choices`` is not a list of message objects
    """
    pass
