"""Context map models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from switchboard.taxonomy.enums import Domain


class SourceType(str, Enum):
    """Where the data-loading layer fetches a field from.

    Fields are grouped by source so the caller can batch fetches per
    external system.
    """

    RECORD_LOOKUP = "record_lookup"
    AGGREGATE_QUERY = "aggregate_query"
    STATIC_LIST = "static_list"
    SESSION = "session"
    DERIVED = "derived"
    EXTERNAL = "external"


class ContextPriority(str, Enum):
    """Whether a prompt can be built without the field."""

    REQUIRED = "required"
    OPTIONAL = "optional"


class ValueKind(str, Enum):
    """Shape of a field's value, used to pick its empty default."""

    SCALAR = "scalar"
    RECORD = "record"
    LIST = "list"


class ContextField(BaseModel):
    """One piece of external data a prompt needs."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1)
    source_type: SourceType
    priority: ContextPriority
    domain: Domain
    description: str
    source_detail: str = Field(default="", description="Table, query or derivation behind the field")
    value_kind: ValueKind = ValueKind.SCALAR
    cache_seconds: int | None = Field(default=None, ge=0)
    depends_on: tuple[str, ...] = ()

    @property
    def required(self) -> bool:
        return self.priority == ContextPriority.REQUIRED

    def empty_value(self) -> Any:
        """Value used when an optional field could not be resolved."""
        if self.value_kind == ValueKind.LIST:
            return []
        if self.value_kind == ValueKind.RECORD:
            return {}
        return ""


class ProcessStepContext(BaseModel):
    """Context fields needed for one step of one domain's process."""

    model_config = ConfigDict(frozen=True)

    domain: Domain
    step: str = Field(..., min_length=1)
    name: str = ""
    description: str = ""
    fields: tuple[ContextField, ...] = ()
    preconditions: tuple[str, ...] = ()
    postconditions: tuple[str, ...] = ()

    @property
    def keys(self) -> tuple[str, ...]:
        return tuple(field.key for field in self.fields)

    @property
    def required_fields(self) -> tuple[ContextField, ...]:
        return tuple(field for field in self.fields if field.required)

    @property
    def optional_fields(self) -> tuple[ContextField, ...]:
        return tuple(field for field in self.fields if not field.required)

    @property
    def required_keys(self) -> tuple[str, ...]:
        return tuple(field.key for field in self.required_fields)

    def get_field(self, key: str) -> ContextField | None:
        return next((field for field in self.fields if field.key == key), None)


class DomainContext(BaseModel):
    """A domain's shared fields and its process steps.

    Steps list only their own fields; shared fields apply to every step.
    """

    model_config = ConfigDict(frozen=True)

    domain: Domain
    name: str
    description: str = ""
    shared_fields: tuple[ContextField, ...] = ()
    steps: tuple[ProcessStepContext, ...] = ()


class ContextSummary(BaseModel):
    """Field counts for one domain, summed over its steps."""

    model_config = ConfigDict(frozen=True)

    steps: int
    total_fields: int
    required_fields: int
