"""
Request body builders for the Google Forms API.

Pure functions mapping validated tool inputs to the bodies expected by
``forms.create`` and ``forms.batchUpdate``. Nothing here touches the network.
"""

from typing_extensions import Any, Dict, List, Optional, Sequence

from .forms_types import QuestionKind

# New questions are always inserted at the top of the form, so the most
# recently added question is the first visible item.
FRONT_INSERT_INDEX = 0

# Choice questions render as radio buttons (single select)
CHOICE_TYPE = "RADIO"


def build_create_form_request(title: str, description: Optional[str] = None) -> Dict[str, Any]:
    """
    Build the body for ``forms.create``.

    ``info.description`` is only set for a non-empty description; an empty
    string would overwrite the form's default.

    Args:
        title: Used for both the form title and the document title
        description: Optional form description

    Returns:
        Form resource body
    """
    info: Dict[str, Any] = {
        "title": title,
        "documentTitle": title,
    }

    if description:
        info["description"] = description

    return {"info": info}


def build_choice_options(options: Sequence[str]) -> List[Dict[str, str]]:
    """Map option labels to choice values, keeping order and duplicates."""
    return [{"value": option} for option in options]


def build_question(
    kind: QuestionKind,
    required: bool = False,
    options: Optional[Sequence[str]] = None,
) -> Dict[str, Any]:
    """Build the ``question`` object of a question item."""
    question: Dict[str, Any] = {"required": required}

    if kind == QuestionKind.TEXT:
        question["textQuestion"] = {}
    elif kind == QuestionKind.CHOICE:
        if options is None:
            raise ValueError("Choice questions require a list of options")
        question["choiceQuestion"] = {
            "type": CHOICE_TYPE,
            "options": build_choice_options(options),
        }
    else:
        raise ValueError(f"Unsupported question kind: {kind}")

    return question


def build_add_question_request(
    kind: QuestionKind,
    title: str,
    required: bool = False,
    options: Optional[Sequence[str]] = None,
) -> Dict[str, Any]:
    """
    Build the ``forms.batchUpdate`` body adding one question.

    The request holds a single ``createItem`` at ``location.index`` 0.

    Args:
        kind: TEXT or CHOICE
        title: Question title
        required: Whether an answer is required
        options: Ordered option labels, required for CHOICE

    Returns:
        Batch update request body

    Raises:
        ValueError: If a CHOICE question has no options list
    """
    return {
        "requests": [
            {
                "createItem": {
                    "item": {
                        "title": title,
                        "questionItem": {
                            "question": build_question(kind, required, options),
                        },
                    },
                    "location": {"index": FRONT_INSERT_INDEX},
                }
            }
        ]
    }
