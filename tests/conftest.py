"""Shared fixtures for the Google Forms tool tests.

The Forms service is a MagicMock shaped like the googleapiclient resource:
``service.forms().create(body=...).execute()`` and friends.
"""

import json
from unittest.mock import MagicMock

import httplib2
import pytest
from googleapiclient.errors import HttpError

from config.settings import Settings
from forms.forms_client import FormsClient
from forms.forms_tools import FormsToolHandlers

STUB_FORM_ID = "1FAIpQLSstubFormId"


def make_http_error(status: int, message: str) -> HttpError:
    """Build an HttpError carrying a Google API style JSON error body."""
    body = {"error": {"code": status, "message": message, "status": "ERROR"}}
    return HttpError(
        httplib2.Response({"status": status}),
        json.dumps(body).encode("utf-8"),
    )


@pytest.fixture
def forms_service():
    """Mock Forms v1 service with canned successful responses."""
    service = MagicMock()
    forms = service.forms.return_value
    forms.create.return_value.execute.return_value = {
        "formId": STUB_FORM_ID,
        "info": {"title": "Survey", "documentTitle": "Survey"},
        "responderUri": f"https://docs.google.com/forms/d/e/{STUB_FORM_ID}/viewform",
    }
    forms.batchUpdate.return_value.execute.return_value = {
        "replies": [{"createItem": {"itemId": "0a1b2c3d", "questionId": ["4e5f6a7b"]}}]
    }
    forms.get.return_value.execute.return_value = {
        "formId": "F1",
        "info": {"title": "Team Survey", "documentTitle": "Team Survey"},
        "items": [
            {
                "itemId": "0a1b2c3d",
                "title": "Color?",
                "questionItem": {
                    "question": {
                        "questionId": "4e5f6a7b",
                        "choiceQuestion": {
                            "type": "RADIO",
                            "options": [{"value": "Red"}, {"value": "Blue"}],
                        },
                    }
                },
            }
        ],
    }
    forms.responses.return_value.list.return_value.execute.return_value = {
        "responses": [
            {
                "responseId": "ACYDBNj",
                "lastSubmittedTime": "2024-05-01T10:00:00.000Z",
                "answers": {
                    "4e5f6a7b": {
                        "questionId": "4e5f6a7b",
                        "textAnswers": {"answers": [{"value": "Blue"}]},
                    }
                },
            }
        ]
    }
    return service


@pytest.fixture
def forms_client(forms_service):
    return FormsClient(forms_service)


@pytest.fixture
def handlers(forms_client):
    return FormsToolHandlers(forms_client)


@pytest.fixture
def test_settings(monkeypatch):
    """Settings with test credentials, isolated from .env and the environment."""
    for name in ("GOOGLE_CLIENT_ID", "GOOGLE_CLIENT_SECRET", "GOOGLE_REFRESH_TOKEN", "DEBUG"):
        monkeypatch.delenv(name, raising=False)
    return Settings(
        _env_file=None,
        google_client_id="test_client_id.apps.googleusercontent.com",
        google_client_secret="test_secret",
        google_refresh_token="test_refresh_token",
    )
