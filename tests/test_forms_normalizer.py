"""Tests for Forms response normalization."""

import json
import logging
from unittest.mock import Mock

import pytest
from google.auth.exceptions import RefreshError

from forms.normalizer import (
    RemoteError,
    error_result,
    form_created_payload,
    question_added_payload,
    remote_body_result,
    responder_uri,
    success_result,
)

from conftest import make_http_error


class TestResponderUri:

    @pytest.mark.parametrize("form_id", ["abc", "1FAIpQLSd-x_Y", "F1"])
    def test_template(self, form_id):
        assert responder_uri(form_id) == f"https://docs.google.com/forms/d/{form_id}/viewform"


class TestPayloads:

    def test_form_created_without_description(self):
        assert form_created_payload("stub", "Survey", None) == {
            "formId": "stub",
            "title": "Survey",
            "description": "",
            "responderUri": "https://docs.google.com/forms/d/stub/viewform",
        }

    def test_form_created_with_description(self):
        payload = form_created_payload("stub", "Survey", "About you")
        assert payload["description"] == "About you"

    def test_text_question_payload_key_order(self):
        payload = question_added_payload("Text question added successfully", "Name?", False)
        assert list(payload) == ["success", "message", "questionTitle", "required"]
        assert payload["success"] is True

    def test_choice_question_payload_key_order(self):
        payload = question_added_payload("added", "Color?", True, ["Red", "Blue"])
        assert list(payload) == ["success", "message", "questionTitle", "options", "required"]
        assert payload["options"] == ["Red", "Blue"]
        assert payload["required"] is True


class TestEnvelopes:

    def test_success_is_pretty_json(self):
        result = success_result({"a": 1})
        assert result.is_error is False
        assert result.payload == '{\n  "a": 1\n}'

    def test_success_keeps_non_ascii(self):
        result = success_result({"title": "Encuesta ñ"})
        assert "ñ" in result.payload

    def test_remote_body_passes_through_verbatim(self):
        body = {"formId": "F1", "items": [{"itemId": "x"}], "revisionId": "00000002"}
        result = remote_body_result(body)
        assert json.loads(result.payload) == body

    def test_error_message(self):
        result = error_result("getting form responses", Exception("quota exceeded"))
        assert result.is_error is True
        assert result.payload == "Error getting form responses: quota exceeded"

    def test_error_without_message_uses_placeholder(self):
        result = error_result("getting form", Exception())
        assert result.payload == "Error getting form: Unknown error"

    def test_http_error_uses_api_message(self):
        error = make_http_error(404, "Requested entity was not found.")
        result = error_result("getting form", error)
        assert result.payload == "Error getting form: Requested entity was not found."

    def test_error_payload_has_no_traceback(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError as e:
            result = error_result("creating form", e)
        assert result.payload == "Error creating form: boom"
        assert "Traceback" not in result.payload


class TestRemoteError:

    def test_from_plain_exception(self):
        assert RemoteError.from_exception(ValueError("bad input")).message == "bad input"

    def test_from_refresh_error(self):
        error = RefreshError("invalid_grant: Token has been expired or revoked.", {"error": "invalid_grant"})
        assert RemoteError.from_exception(error).message == "invalid_grant: Token has been expired or revoked."

    def test_describe_falls_back(self):
        assert RemoteError().describe() == "Unknown error"
        assert RemoteError(message="").describe() == "Unknown error"


class TestDebugSideChannel:

    def test_debug_logger_receives_details(self):
        debug_logger = Mock(spec=logging.Logger)
        error = Exception("quota exceeded")
        result = error_result("getting form", error, debug_logger)

        debug_logger.error.assert_called_once()
        assert debug_logger.error.call_args.kwargs["exc_info"] is error
        assert result.payload == "Error getting form: quota exceeded"

    def test_envelope_is_the_same_with_or_without_debug_logger(self):
        error = Exception("quota exceeded")
        assert error_result("getting form", error, Mock(spec=logging.Logger)) == error_result("getting form", error)
