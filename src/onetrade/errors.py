"""Provider and aggregation error types."""

from __future__ import annotations

from enum import Enum


class ProviderErrorCode(Enum):
    """Error classification codes."""

    MISSING_CREDENTIAL = "missing_credential"
    INVALID_REQUEST = "invalid_request"
    TRANSPORT_FAILURE = "transport_failure"
    MALFORMED_RESPONSE = "malformed_response"
    RATE_LIMITED = "rate_limited"
    EMPTY_RESULT = "empty_result"
    EXHAUSTED_FALLBACK = "exhausted_fallback"


_RETRYABLE = {ProviderErrorCode.RATE_LIMITED, ProviderErrorCode.TRANSPORT_FAILURE}


class ProviderError(Exception):
    """Provider exception with error code and transport context.

    Attributes:
        message: Human-readable error description.
        code: Structured error code for programmatic handling.
        provider: Name of the provider that raised it, if known.
        status_code: HTTP status for transport failures.
        retryable: Whether the failure is transient. Informational only,
            nothing in this package re-attempts a provider call.
    """

    def __init__(
        self,
        message: str,
        code: ProviderErrorCode = ProviderErrorCode.TRANSPORT_FAILURE,
        provider: str | None = None,
        status_code: int | None = None,
        retryable: bool | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.provider = provider
        self.status_code = status_code
        self.retryable = code in _RETRYABLE if retryable is None else retryable


class ExhaustedFallbackError(ProviderError):
    """Every company-info provider and the text generator failed."""

    def __init__(self, message: str, last_cause: BaseException | None = None) -> None:
        super().__init__(message, code=ProviderErrorCode.EXHAUSTED_FALLBACK)
        self.last_cause = last_cause


class SentimentError(Exception):
    """Sentiment panel failure, labeled with the stage that failed.

    ``stage`` is ``"news"`` when the article window could not be fetched and
    ``"generation"`` when the text generator failed.
    """

    NEWS = "news"
    GENERATION = "generation"

    def __init__(self, stage: str, cause: BaseException | None = None) -> None:
        label = "News unavailable" if stage == self.NEWS else "Sentiment generation failed"
        message = f"{label}: {cause}" if cause is not None else label
        super().__init__(message)
        self.stage = stage
        self.cause = cause
