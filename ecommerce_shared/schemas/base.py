"""Schema Base — camelCase wire aliases shared by every domain contract.

Invariants:
    - Input accepts both camelCase (wire) and snake_case (Python) keys
    - model_dump(by_alias=True) reproduces the backend's camelCase JSON

Design Decisions:
    - alias_generator over per-field Field(alias=...): one rule, no drift
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for all schemas exchanged with the backend API."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
