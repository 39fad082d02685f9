"""
Tool registry for the Google Forms tools.

Associates each tool name with its ToolSpec and handler, validates call
arguments against each ToolSpec's input model and exposes the tools to a FastMCP
server. The registry holds no business logic of its own.
"""

import inspect
import logging
from dataclasses import dataclass, field

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent
from pydantic import BaseModel, Field, ValidationError
from typing_extensions import (
    Annotated,
    Any,
    Awaitable,
    Callable,
    Dict,
    FrozenSet,
    List,
    Mapping,
    Type,
)

from .forms_types import FormsToolResult

logger = logging.getLogger(__name__)

ToolHandler = Callable[[BaseModel], Awaitable[FormsToolResult]]


class DuplicateToolError(ValueError):
    """Raised when a tool name is registered twice."""


class ToolNotFoundError(LookupError):
    """Raised when dispatching to a tool that was never registered."""


class ToolInputError(ValueError):
    """Raised when call arguments do not match the tool's input schema."""


@dataclass(frozen=True)
class ToolSpec:
    """Immutable description of one tool."""

    name: str
    title: str
    description: str
    input_model: Type[BaseModel]
    annotations: Dict[str, Any] = field(default_factory=dict)
    tags: FrozenSet[str] = frozenset()

    @property
    def input_schema(self) -> Dict[str, Any]:
        """JSON schema of the tool arguments."""
        return self.input_model.model_json_schema()


class ToolRegistry:
    """In-memory registry of tools, fixed once the server starts."""

    def __init__(self) -> None:
        self._specs: Dict[str, ToolSpec] = {}
        self._handlers: Dict[str, ToolHandler] = {}

    def register(self, spec: ToolSpec, handler: ToolHandler) -> None:
        """
        Register a tool.

        Raises:
            DuplicateToolError: If a tool with the same name already exists
        """
        if spec.name in self._specs:
            raise DuplicateToolError(f"Tool '{spec.name}' is already registered")
        self._specs[spec.name] = spec
        self._handlers[spec.name] = handler
        logger.debug(f"Registered tool '{spec.name}'")

    def get(self, name: str) -> ToolSpec:
        try:
            return self._specs[name]
        except KeyError:
            raise ToolNotFoundError(f"Tool '{name}' is not registered") from None

    def specs(self) -> List[ToolSpec]:
        return list(self._specs.values())

    def names(self) -> List[str]:
        return list(self._specs)

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def __len__(self) -> int:
        return len(self._specs)

    async def dispatch(self, name: str, args: Mapping[str, Any]) -> FormsToolResult:
        """
        Validate ``args`` and run the tool's handler.

        Validation happens before the handler, so invalid input raises
        instead of producing an error envelope.

        Raises:
            ToolNotFoundError: Unknown tool name
            ToolInputError: Arguments fail the input schema
        """
        spec = self.get(name)
        try:
            validated = spec.input_model.model_validate(dict(args))
        except ValidationError as e:
            raise ToolInputError(f"Invalid arguments for tool '{name}': {e}") from e
        return await self._handlers[name](validated)

    # ------------------------------------------------------------------
    # FastMCP binding
    # ------------------------------------------------------------------

    def attach(self, mcp: FastMCP) -> None:
        """Register every tool with a FastMCP server."""
        for spec in self._specs.values():
            mcp.tool(
                self._mcp_entrypoint(spec),
                name=spec.name,
                title=spec.title,
                description=spec.description,
                tags=set(spec.tags),
                annotations=spec.annotations,
            )
            logger.info(f"Bound tool '{spec.name}' to MCP server '{mcp.name}'")

    def _mcp_entrypoint(self, spec: ToolSpec) -> Callable[..., Awaitable[ToolResult]]:
        """
        Build the function FastMCP calls for ``spec``.

        The function advertises the input model's fields as keyword-only
        parameters so the runtime derives the same schema.
        """
        registry = self

        async def call_tool(**arguments: Any) -> ToolResult:
            result = await registry.dispatch(spec.name, arguments)
            return render_tool_result(result)

        parameters = []
        annotations: Dict[str, Any] = {}
        for field_name, model_field in spec.input_model.model_fields.items():
            annotation = Annotated[model_field.annotation, Field(description=model_field.description)]
            default = inspect.Parameter.empty if model_field.is_required() else model_field.default
            parameters.append(
                inspect.Parameter(
                    field_name,
                    inspect.Parameter.KEYWORD_ONLY,
                    default=default,
                    annotation=annotation,
                )
            )
            annotations[field_name] = annotation
        annotations["return"] = ToolResult

        call_tool.__signature__ = inspect.Signature(parameters, return_annotation=ToolResult)
        call_tool.__annotations__ = annotations
        call_tool.__name__ = spec.name
        call_tool.__qualname__ = spec.name
        call_tool.__doc__ = spec.description
        return call_tool


def render_tool_result(result: FormsToolResult) -> ToolResult:
    """
    Turn an envelope into what FastMCP sends back.

    Errors are raised as ToolError, which FastMCP reports with isError set
    and the message as the only text content.
    """
    if result.is_error:
        raise ToolError(result.payload)
    return ToolResult(content=[TextContent(type="text", text=result.payload)])
