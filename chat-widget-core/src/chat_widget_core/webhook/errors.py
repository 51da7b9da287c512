"""
Classified webhook failures.

Every way a turn can fail is mapped to one 'ClassifiedError' subclass. The
'display_text' is shown to the user as a flagged bot message, so it is written
as operator guidance: it tells whoever maintains the automation endpoint what
to check, rather than just naming the failure.
"""

from enum import StrEnum


class ErrorKind(StrEnum):
    NETWORK_UNREACHABLE = "network_unreachable"
    HTTP_STATUS = "http_status"
    INVALID_OR_EMPTY_RESPONSE = "invalid_or_empty_response"
    UNKNOWN = "unknown"


class ClassifiedError(Exception):
    """Base class for failures that become an error-flagged bot message."""

    kind: ErrorKind = ErrorKind.UNKNOWN

    def __init__(self, display_text: str) -> None:
        super().__init__(display_text)
        self.display_text = display_text


class NetworkUnreachableError(ClassifiedError):
    kind = ErrorKind.NETWORK_UNREACHABLE

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(
            "⚠️ **Connection error (network/CORS)**\n\n"
            f"Could not reach the automation webhook at:\n`{url}`\n\n"
            "Likely causes:\n"
            "1. A **cross-origin (CORS)** policy is blocking the call (allow the widget origin on the webhook node).\n"
            "2. The automation host is offline or unreachable.\n"
            "3. The request was blocked as **mixed content** (an http:// webhook called from an https:// page)."
        )


_STATUS_GUIDANCE: dict[int, str] = {
    404: (
        "⚠️ **Error 404 (Not Found)**\n\n"
        "The automation reported that the webhook does not exist. Check that:\n"
        "1. The workflow is **active**.\n"
        "2. You are using the **production** URL, not the test URL.\n"
        "3. The webhook accepts the POST method."
    ),
    405: (
        "⚠️ **Error 405 (Method Not Allowed)**\n\n"
        "The HTTP method was rejected. The widget sends **POST**; make sure the webhook is configured for POST."
    ),
    500: (
        "⚠️ **Error 500 (Server Error)**\n\n"
        "The workflow failed while executing. Check the automation's execution log to see which step failed."
    ),
}


class WebhookHTTPStatusError(ClassifiedError):
    kind = ErrorKind.HTTP_STATUS

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(_STATUS_GUIDANCE.get(status_code, f"⚠️ HTTP error {status_code}"))


class InvalidResponseError(ClassifiedError):
    kind = ErrorKind.INVALID_OR_EMPTY_RESPONSE

    def __init__(self) -> None:
        super().__init__("⚠️ The automation returned an empty response or an invalid format.")


class UnknownWebhookError(ClassifiedError):
    kind = ErrorKind.UNKNOWN

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"⚠️ **Technical error:**\n{detail or 'Unknown error'}")

    @classmethod
    def from_exception(cls, exc: BaseException) -> "UnknownWebhookError":
        return cls(str(exc) or type(exc).__name__)
