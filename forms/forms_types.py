"""
Type definitions for the Google Forms tools.

The pydantic input models define each tool's argument schema. The TypedDict
classes describe the JSON payloads returned on success.
"""

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, Field
from typing_extensions import List, Optional, TypedDict


class QuestionKind(str, Enum):
    """Kinds of question item this server can create."""
    TEXT = "TEXT"
    CHOICE = "CHOICE"


@dataclass(frozen=True)
class FormsToolResult:
    """Envelope returned by every Forms tool handler.

    ``payload`` is JSON text when ``is_error`` is False and a plain
    human-readable message otherwise.
    """
    is_error: bool
    payload: str


# ============================================================================
# TOOL INPUTS
# ============================================================================


class CreateFormInput(BaseModel):
    """Arguments for create_form."""
    title: str = Field(description="Title of the form")
    description: Optional[str] = Field(
        default=None, description="Description of the form (optional)"
    )


class AddTextQuestionInput(BaseModel):
    """Arguments for add_text_question."""
    formId: str = Field(description="Form ID")
    questionTitle: str = Field(description="Title of the question")
    required: bool = Field(
        default=False,
        description="Whether it is required (optional, default is false)",
    )


class AddMultipleChoiceQuestionInput(BaseModel):
    """Arguments for add_multiple_choice_question."""
    formId: str = Field(description="Form ID")
    questionTitle: str = Field(description="Title of the question")
    options: List[str] = Field(description="Array of options")
    required: bool = Field(
        default=False,
        description="Whether it is required (optional, default is false)",
    )


class FormIdInput(BaseModel):
    """Arguments for tools that only need a form ID."""
    formId: str = Field(description="Form ID")


# ============================================================================
# SUCCESS PAYLOADS
# ============================================================================


class FormCreationResult(TypedDict):
    """Payload for a created form."""
    formId: Optional[str]
    title: str
    description: str  # Empty string when none was given
    responderUri: str


class QuestionAddedResult(TypedDict, total=False):
    """Payload echoing an added question. ``options`` only for choice questions."""
    success: bool
    message: str
    questionTitle: str
    options: List[str]
    required: bool
