"""Pydantic schemas for classification results and extracted entities."""

from datetime import date
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from nlu.catalog import ActionType, Intent, QueryType


class TextValue(BaseModel):
    """A single extracted string (contract number, customer name, ...)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    value: str


class FieldList(BaseModel):
    """Contract field names requested by the user, in query order."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["fields"] = "fields"
    values: tuple[str, ...]


class DateRangeValue(BaseModel):
    """Inclusive date range. Either side may be open."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["date_range"] = "date_range"
    start: date | None = None
    end: date | None = None


class Diagnostic(BaseModel):
    """Problem found while extracting an entity, reported instead of raised."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["diagnostic"] = "diagnostic"
    message: str


EntityValue = Annotated[
    Union[TextValue, FieldList, DateRangeValue, Diagnostic],
    Field(discriminator="kind"),
]


class ClassificationResult(BaseModel):
    """Outcome of classifying one query."""

    model_config = ConfigDict(frozen=True)

    intent: Intent
    confidence: float = Field(..., ge=0.0, le=1.0)
    entities: dict[str, EntityValue] = Field(default_factory=dict)
    missing_fields: list[str] = Field(default_factory=list)
    action_required: str
    original_query: str
    normalized_query: str = ""
    query_type: QueryType = QueryType.GENERAL
    action_type: ActionType = ActionType.UNKNOWN
    intent_scores: dict[str, float] = Field(
        default_factory=dict, description="Statistical score per category"
    )

    def entity_text(self, key: str) -> str | None:
        """Return a text entity's value, or None when absent or not text."""
        value = self.entities.get(key)
        if isinstance(value, TextValue):
            return value.value
        return None
