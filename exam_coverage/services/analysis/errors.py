"""
Error classifier

Maps any failure of an analysis run to an ``AnalysisFailure``.

The Gemini API exposes no stable error codes for these cases, so the
credential and permission rules match known substrings of the error text
(plus the HTTP status when the SDK provides one). Rules are checked in
order and the first match wins.
"""

from typing import Callable, List, Optional, Tuple, Union

from exam_coverage.models import AnalysisFailure, FailureKind, RecoveryAction

from .exceptions import (
    EmptyResponseError,
    EncodingError,
    MalformedResponseError,
    MissingCredentialError,
)

ErrorInput = Union[BaseException, str, None]

INVALID_CREDENTIAL_MARKERS = (
    "requested entity was not found",
    "api key not valid",
    "api_key_invalid",
)
PERMISSION_DENIED_MARKERS = (
    "403",
    "permission_denied",
    "permission denied",
    "forbidden",
)

MESSAGES = {
    FailureKind.INVALID_CREDENTIAL: (
        "The current API key is invalid or has no access to the analysis model. "
        "Select a key from a Google Cloud project with billing enabled."
    ),
    FailureKind.PERMISSION_DENIED: (
        "Permission denied (403). Check that the Generative Language API is enabled for this API key."
    ),
    FailureKind.MISSING_CREDENTIAL: "No API key is configured. Select an API key to run the analysis.",
    FailureKind.EMPTY_RESPONSE: "The AI service returned an empty report. Please try again.",
    FailureKind.MALFORMED_RESPONSE: "The AI service returned a report in an unexpected format. Please try again.",
    FailureKind.ENCODING_ERROR: "One of the uploaded files could not be read. Remove it and upload it again.",
}
UNKNOWN_ERROR_MESSAGE = "Analysis failed: unknown error."


def _message_of(error: ErrorInput) -> str:
    if error is None:
        return ""
    if isinstance(error, str):
        return error
    return str(error)


def _status_of(error: ErrorInput) -> Optional[int]:
    """HTTP status carried by SDK errors (``google.genai.errors.APIError.code``)."""
    if error is None or isinstance(error, str):
        return None
    for attr in ("code", "status_code"):
        value = getattr(error, attr, None)
        if isinstance(value, int) and not isinstance(value, bool):
            return value
    return None


def _contains_any(text: str, markers) -> bool:
    lowered = text.lower()
    return any(marker in lowered for marker in markers)


def _is_invalid_credential(error: ErrorInput, text: str) -> bool:
    return _status_of(error) == 404 or _contains_any(text, INVALID_CREDENTIAL_MARKERS)


def _is_permission_denied(error: ErrorInput, text: str) -> bool:
    return _status_of(error) == 403 or _contains_any(text, PERMISSION_DENIED_MARKERS)


def _is_instance(exc_type) -> Callable[[ErrorInput, str], bool]:
    return lambda error, _text: isinstance(error, exc_type)


# (predicate, kind, recovery), evaluated in order
RULES: List[Tuple[Callable[[ErrorInput, str], bool], FailureKind, RecoveryAction]] = [
    (_is_invalid_credential, FailureKind.INVALID_CREDENTIAL, RecoveryAction.REACQUIRE_CREDENTIAL),
    (_is_permission_denied, FailureKind.PERMISSION_DENIED, RecoveryAction.NONE),
    (_is_instance(MissingCredentialError), FailureKind.MISSING_CREDENTIAL, RecoveryAction.REACQUIRE_CREDENTIAL),
    (_is_instance(EmptyResponseError), FailureKind.EMPTY_RESPONSE, RecoveryAction.NONE),
    (_is_instance(MalformedResponseError), FailureKind.MALFORMED_RESPONSE, RecoveryAction.NONE),
    (_is_instance(EncodingError), FailureKind.ENCODING_ERROR, RecoveryAction.NONE),
]


def classify_error(error: ErrorInput) -> AnalysisFailure:
    """
    Classify a failure into exactly one FailureKind.

    Args:
        error: The raised exception, or a raw error message

    Returns:
        AnalysisFailure with a user-facing message, the recovery action and
        the original error text in ``detail``
    """
    text = _message_of(error)

    for matches, kind, recovery in RULES:
        if matches(error, text):
            return AnalysisFailure(kind=kind, message=MESSAGES[kind], recovery=recovery, detail=text)

    return AnalysisFailure(
        kind=FailureKind.UNKNOWN,
        message=text or UNKNOWN_ERROR_MESSAGE,
        recovery=RecoveryAction.NONE,
        detail=text,
    )
