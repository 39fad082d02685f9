"""Async wrapper around the credentialed Google Forms service."""

import asyncio
import logging

from typing_extensions import Any, Dict

logger = logging.getLogger(__name__)


class FormsClient:
    """
    Issues exactly one Forms API request per call.

    The googleapiclient resource is blocking, so each ``execute`` runs in a
    worker thread and the calling coroutine suspends until it resolves or
    raises. No retries are attempted and errors propagate unchanged.
    """

    def __init__(self, service: Any):
        self._service = service

    @property
    def service(self) -> Any:
        return self._service

    async def create_form(self, body: Dict[str, Any]) -> Dict[str, Any]:
        """Create a new form from a form resource body."""
        logger.debug("forms.create")
        return await self._execute(self._service.forms().create(body=body))

    async def batch_update(self, form_id: str, body: Dict[str, Any]) -> Dict[str, Any]:
        """Apply a batch update to an existing form."""
        logger.debug(f"forms.batchUpdate formId={form_id}")
        return await self._execute(
            self._service.forms().batchUpdate(formId=form_id, body=body)
        )

    async def get_form(self, form_id: str) -> Dict[str, Any]:
        """Fetch the form resource."""
        logger.debug(f"forms.get formId={form_id}")
        return await self._execute(self._service.forms().get(formId=form_id))

    async def list_responses(self, form_id: str) -> Dict[str, Any]:
        """Fetch the form's responses collection (first page only)."""
        logger.debug(f"forms.responses.list formId={form_id}")
        return await self._execute(
            self._service.forms().responses().list(formId=form_id)
        )

    @staticmethod
    async def _execute(request: Any) -> Dict[str, Any]:
        return await asyncio.to_thread(request.execute)
