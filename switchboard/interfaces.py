"""Interfaces of the external collaborators.

The core never fetches data or runs tools itself; hosts plug these in.
"""

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Protocol

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from switchboard.context.models import ContextField


class ContextResolver(Protocol):
    """Data-loading layer: fetches values for declared context fields."""

    def resolve(self, fields: Sequence["ContextField"]) -> Mapping[str, Any]:
        """Fetch values for the given fields.

        Args:
            fields: Fields of one process step, shared fields first

        Returns:
            Key to value; a key may be absent or None when it could not be
            fetched
        """
        ...


class ToolResult(BaseModel):
    """Outcome of one tool invocation."""

    tool_name: str
    success: bool
    result: dict[str, Any] | None = None
    error: str | None = Field(default=None, description="Failure reason when success is False")


class ToolInvoker(Protocol):
    """Tool-execution layer: performs the business action behind a tool name."""

    def invoke(self, tool: str, args: Mapping[str, Any]) -> ToolResult:
        """Run a tool.

        Args:
            tool: Tool name from the tool catalog
            args: Rendered step arguments

        Returns:
            Success flag with the result payload or error
        """
        ...
