"""Google Forms tools for FastMCP."""

from .forms_client import FormsClient
from .forms_tools import FORMS_TOOL_SPECS, FormsToolHandlers, build_forms_registry, setup_forms_tools
from .forms_types import (
    AddMultipleChoiceQuestionInput,
    AddTextQuestionInput,
    CreateFormInput,
    FormCreationResult,
    FormIdInput,
    FormsToolResult,
    QuestionAddedResult,
    QuestionKind,
)
from .normalizer import RemoteError
from .registry import (
    DuplicateToolError,
    ToolInputError,
    ToolNotFoundError,
    ToolRegistry,
    ToolSpec,
)

__all__ = [
    "setup_forms_tools",
    "build_forms_registry",
    "FORMS_TOOL_SPECS",
    "FormsToolHandlers",
    "FormsClient",
    "ToolRegistry",
    "ToolSpec",
    "DuplicateToolError",
    "ToolInputError",
    "ToolNotFoundError",
    "RemoteError",
    "FormsToolResult",
    "QuestionKind",
    "CreateFormInput",
    "AddTextQuestionInput",
    "AddMultipleChoiceQuestionInput",
    "FormIdInput",
    "FormCreationResult",
    "QuestionAddedResult",
]
