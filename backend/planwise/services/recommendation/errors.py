"""Recommendation failure taxonomy.

Every failure reaches the user as one category of message; the subclass and
its ``kind`` tag keep them apart for logging and tests.
"""


class RecommendationError(Exception):
    kind = "unknown"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    @property
    def user_message(self) -> str:
        return f"Failed to get recommendations from AI: {self.detail}"


class EmptyResponse(RecommendationError):
    """The generation call returned no content."""
    kind = "empty_response"


class SchemaViolation(RecommendationError):
    """Content is not JSON, not an array, or an element is not a valid plan."""
    kind = "schema_violation"


class EmptyResultSet(RecommendationError):
    """A structurally valid but zero-length list of plans."""
    kind = "empty_result_set"


class TransportFailure(RecommendationError):
    """The underlying call errored (network, auth, quota, timeout)."""
    kind = "transport_failure"
