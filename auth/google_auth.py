"""Credential bootstrap for the Google Forms API.

Builds refresh-token credentials from the configured OAuth client and a
single Forms v1 service object for the server's lifetime. Token refresh is
left to google-auth.
"""

import logging

from google.oauth2.credentials import Credentials
from googleapiclient.discovery import build
from typing_extensions import Any, Optional

from config.settings import Settings, settings

logger = logging.getLogger(__name__)

FORMS_SCOPES = [
    "https://www.googleapis.com/auth/forms.body",
    "https://www.googleapis.com/auth/forms.responses.readonly",
]

FORMS_API_NAME = "forms"
FORMS_API_VERSION = "v1"


class GoogleAuthError(Exception):
    """Raised when the credentialed Forms client cannot be created."""
    pass


def build_credentials(config: Optional[Settings] = None) -> Credentials:
    """
    Build OAuth2 credentials from the configured refresh token.

    No access token is minted here; google-auth refreshes on the first request.

    Args:
        config: Settings to read credentials from (defaults to global settings)

    Returns:
        Credentials: Refresh-token based user credentials

    Raises:
        GoogleAuthError: If the OAuth configuration is incomplete
    """
    config = config or settings
    try:
        config.validate_oauth_config()
    except ValueError as e:
        raise GoogleAuthError(str(e)) from e

    return Credentials(
        token=None,
        refresh_token=config.google_refresh_token,
        token_uri=config.google_token_uri,
        client_id=config.google_client_id,
        client_secret=config.google_client_secret,
        scopes=FORMS_SCOPES,
    )


def build_forms_service(config: Optional[Settings] = None) -> Any:
    """
    Create the credentialed Google Forms service.

    Args:
        config: Settings to read credentials from (defaults to global settings)

    Returns:
        The googleapiclient Forms v1 resource

    Raises:
        GoogleAuthError: If credentials are missing or the service cannot be built
    """
    credentials = build_credentials(config)
    try:
        service = build(
            FORMS_API_NAME,
            FORMS_API_VERSION,
            credentials=credentials,
            cache_discovery=False,
        )
    except Exception as e:
        logger.error(f"Failed to create {FORMS_API_NAME} service: {e}")
        raise GoogleAuthError(f"Failed to create {FORMS_API_NAME} service: {e}") from e

    logger.info(f"Created {FORMS_API_NAME} service ({FORMS_API_VERSION})")
    return service
