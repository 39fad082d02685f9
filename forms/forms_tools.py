"""
Google Forms MCP Tools.

Five tools backed by one credentialed Forms service: create a form, add a
text question, add a multiple choice question, get a form and list its
responses. Each handler is a single try/normalize unit returning a
FormsToolResult.
"""

import logging

from fastmcp import FastMCP
from typing_extensions import Any, List, Optional

from config.enhanced_logging import get_debug_logger
from .forms_client import FormsClient
from .forms_types import (
    AddMultipleChoiceQuestionInput,
    AddTextQuestionInput,
    CreateFormInput,
    FormIdInput,
    FormsToolResult,
    QuestionKind,
)
from .normalizer import (
    CHOICE_QUESTION_ADDED_MESSAGE,
    TEXT_QUESTION_ADDED_MESSAGE,
    error_result,
    form_created_payload,
    question_added_payload,
    remote_body_result,
    success_result,
)
from .registry import ToolRegistry, ToolSpec
from .request_builders import build_add_question_request, build_create_form_request

logger = logging.getLogger(__name__)


# ============================================================================
# TOOL SPECS
# ============================================================================

_WRITE_HINTS = {
    "readOnlyHint": False,
    "destructiveHint": False,
    "idempotentHint": False,
    "openWorldHint": True,
}

_READ_HINTS = {
    "readOnlyHint": True,
    "destructiveHint": False,
    "idempotentHint": True,
    "openWorldHint": True,
}

CREATE_FORM = ToolSpec(
    name="create_form",
    title="Create Google Form",
    description="Create a new Google Form with a title and optional description",
    input_model=CreateFormInput,
    annotations={"title": "Create Google Form", **_WRITE_HINTS},
    tags=frozenset({"forms", "create", "google"}),
)

ADD_TEXT_QUESTION = ToolSpec(
    name="add_text_question",
    title="Add Text Question",
    description="Add a text question to an existing Google Form",
    input_model=AddTextQuestionInput,
    annotations={"title": "Add Text Question", **_WRITE_HINTS},
    tags=frozenset({"forms", "questions", "update", "google"}),
)

ADD_MULTIPLE_CHOICE_QUESTION = ToolSpec(
    name="add_multiple_choice_question",
    title="Add Multiple Choice Question",
    description="Add a multiple choice question to an existing Google Form",
    input_model=AddMultipleChoiceQuestionInput,
    annotations={"title": "Add Multiple Choice Question", **_WRITE_HINTS},
    tags=frozenset({"forms", "questions", "update", "google"}),
)

GET_FORM = ToolSpec(
    name="get_form",
    title="Get Form Details",
    description="Get detailed information about a Google Form",
    input_model=FormIdInput,
    annotations={"title": "Get Form Details", **_READ_HINTS},
    tags=frozenset({"forms", "read", "get", "google"}),
)

GET_FORM_RESPONSES = ToolSpec(
    name="get_form_responses",
    title="Get Form Responses",
    description="Get all responses for a Google Form",
    input_model=FormIdInput,
    annotations={"title": "Get Form Responses", **_READ_HINTS},
    tags=frozenset({"forms", "responses", "list", "google"}),
)

FORMS_TOOL_SPECS: List[ToolSpec] = [
    CREATE_FORM,
    ADD_TEXT_QUESTION,
    ADD_MULTIPLE_CHOICE_QUESTION,
    GET_FORM,
    GET_FORM_RESPONSES,
]


# ============================================================================
# HANDLERS
# ============================================================================


class FormsToolHandlers:
    """
    Handlers for the Forms tools.

    Every failure, whether raised while building the request or by the
    remote call, is turned into an error envelope here. Nothing is retried.
    """

    def __init__(self, client: FormsClient, debug_logger: Optional[logging.Logger] = None):
        self._client = client
        self._debug_logger = debug_logger

    async def create_form(self, args: CreateFormInput) -> FormsToolResult:
        try:
            body = build_create_form_request(args.title, args.description)
            created = await self._client.create_form(body)
            form_id = created.get("formId")
            logger.info(f"[create_form] Created form {form_id}")
            return success_result(form_created_payload(form_id, args.title, args.description))
        except Exception as e:
            return error_result("creating form", e, self._debug_logger)

    async def add_text_question(self, args: AddTextQuestionInput) -> FormsToolResult:
        try:
            body = build_add_question_request(
                QuestionKind.TEXT, args.questionTitle, args.required
            )
            await self._client.batch_update(args.formId, body)
            logger.info(f"[add_text_question] Added question to form {args.formId}")
            return success_result(
                question_added_payload(
                    TEXT_QUESTION_ADDED_MESSAGE, args.questionTitle, args.required
                )
            )
        except Exception as e:
            return error_result("adding text question", e, self._debug_logger)

    async def add_multiple_choice_question(
        self, args: AddMultipleChoiceQuestionInput
    ) -> FormsToolResult:
        try:
            body = build_add_question_request(
                QuestionKind.CHOICE, args.questionTitle, args.required, args.options
            )
            await self._client.batch_update(args.formId, body)
            logger.info(
                f"[add_multiple_choice_question] Added question with "
                f"{len(args.options)} options to form {args.formId}"
            )
            return success_result(
                question_added_payload(
                    CHOICE_QUESTION_ADDED_MESSAGE,
                    args.questionTitle,
                    args.required,
                    args.options,
                )
            )
        except Exception as e:
            return error_result("adding multiple choice question", e, self._debug_logger)

    async def get_form(self, args: FormIdInput) -> FormsToolResult:
        try:
            form = await self._client.get_form(args.formId)
            return remote_body_result(form)
        except Exception as e:
            return error_result("getting form", e, self._debug_logger)

    async def get_form_responses(self, args: FormIdInput) -> FormsToolResult:
        try:
            responses = await self._client.list_responses(args.formId)
            return remote_body_result(responses)
        except Exception as e:
            return error_result("getting form responses", e, self._debug_logger)


def build_forms_registry(handlers: FormsToolHandlers) -> ToolRegistry:
    """Register every Forms tool spec with its handler."""
    registry = ToolRegistry()
    for spec in FORMS_TOOL_SPECS:
        registry.register(spec, getattr(handlers, spec.name))
    return registry


def setup_forms_tools(mcp: FastMCP, forms_service: Any, debug: bool = False) -> ToolRegistry:
    """
    Setup and register all Google Forms tools with the MCP server.

    Args:
        mcp: The FastMCP server instance to register tools with
        forms_service: Credentialed Forms v1 service, shared by every call
        debug: Log full failure details through the debug logger

    Returns:
        ToolRegistry: The registry backing the registered tools
    """
    logger.info("Setting up Google Forms tools")

    handlers = FormsToolHandlers(FormsClient(forms_service), get_debug_logger(debug))
    registry = build_forms_registry(handlers)
    registry.attach(mcp)

    logger.info(f"Registered {len(registry)} Google Forms tools: {', '.join(registry.names())}")
    return registry
