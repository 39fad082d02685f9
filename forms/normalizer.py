"""
Response normalization for the Google Forms tools.

Successful results become JSON text and any failure becomes a single
``Error <action>: <message>`` line. Diagnostic details go to the injected
debug logger and never into the envelope.
"""

import json
import logging
from dataclasses import dataclass

from googleapiclient.errors import HttpError
from typing_extensions import Any, Dict, Optional, Sequence

from .forms_types import FormCreationResult, FormsToolResult, QuestionAddedResult

RESPONDER_URI_TEMPLATE = "https://docs.google.com/forms/d/{form_id}/viewform"

UNKNOWN_ERROR_MESSAGE = "Unknown error"

TEXT_QUESTION_ADDED_MESSAGE = "Text question added successfully"
CHOICE_QUESTION_ADDED_MESSAGE = "Multiple choice question added successfully"


@dataclass(frozen=True)
class RemoteError:
    """Message extracted from a failed call. ``message`` may be missing."""

    message: Optional[str] = None

    @classmethod
    def from_exception(cls, error: BaseException) -> "RemoteError":
        if isinstance(error, HttpError):
            # HttpError.reason holds the API's error.message when the body has one
            return cls(message=getattr(error, "reason", None) or None)

        if error.args and isinstance(error.args[0], str):
            return cls(message=error.args[0] or None)

        return cls(message=str(error) or None)

    def describe(self) -> str:
        return self.message or UNKNOWN_ERROR_MESSAGE


def responder_uri(form_id: Optional[str]) -> str:
    """Public URL at which respondents fill out the form."""
    return RESPONDER_URI_TEMPLATE.format(form_id=form_id)


def to_json_text(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def form_created_payload(
    form_id: Optional[str], title: str, description: Optional[str]
) -> FormCreationResult:
    return {
        "formId": form_id,
        "title": title,
        "description": description or "",
        "responderUri": responder_uri(form_id),
    }


def question_added_payload(
    message: str,
    question_title: str,
    required: bool,
    options: Optional[Sequence[str]] = None,
) -> QuestionAddedResult:
    """
    Echo the requested question back to the caller.

    The batch update response is not consulted, so this reflects what was
    asked for rather than what the server stored.
    """
    payload: QuestionAddedResult = {
        "success": True,
        "message": message,
        "questionTitle": question_title,
    }
    if options is not None:
        payload["options"] = list(options)
    payload["required"] = required
    return payload


def success_result(data: Any) -> FormsToolResult:
    return FormsToolResult(is_error=False, payload=to_json_text(data))


def error_result(
    action: str,
    error: BaseException,
    debug_logger: Optional[logging.Logger] = None,
) -> FormsToolResult:
    """
    Convert a failure into the error envelope.

    Args:
        action: What was being done, e.g. "getting form responses"
        error: The exception raised while building or executing the call
        debug_logger: Diagnostic side channel; ignored when None

    Returns:
        FormsToolResult with is_error=True
    """
    if debug_logger is not None:
        debug_logger.error(f"Error {action}: {error!r}", exc_info=error)

    remote_error = RemoteError.from_exception(error)
    return FormsToolResult(
        is_error=True,
        payload=f"Error {action}: {remote_error.describe()}",
    )


def remote_body_result(body: Optional[Dict[str, Any]]) -> FormsToolResult:
    """Pass a remote response body through verbatim."""
    return success_result(body if body is not None else {})
