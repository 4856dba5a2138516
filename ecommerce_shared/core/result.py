"""Result Envelope — the tagged union every API client operation resolves to.

Invariants:
    - Every client call resolves to exactly one of Success[T] | Failure
    - `success` is the discriminant: Literal[True] on Success, Literal[False] on Failure
    - Success carries only `data`; Failure carries only `error` (an ApiError)
    - Envelopes are frozen — callers cannot flip `success` after the fact

Design Decisions:
    - Two classes over one model with optional fields: isinstance/match branching is
      exhaustive for type checkers, and the "wrong" field does not exist at all
    - data typed as the generic T: the client validates into T before wrapping
    - Result is the plain Union[Success, Failure] for isinstance checks; it is not
      subscriptable, since a generic pydantic model parametrized by its own TypeVar is
      the bare class. Signatures spell out Success[T] | Failure instead
    - to_envelope() produces the {success, data} / {success, error} wire dict for callers
      that forward results (e.g. to a UI layer)
"""

from typing import Any, Generic, Literal, NoReturn, TypeVar, Union

from pydantic import BaseModel
from pydantic_core import to_jsonable_python

from ecommerce_shared.core.errors import ApiError, ResultUnwrapError

T = TypeVar("T")
D = TypeVar("D")


class Success(BaseModel, Generic[T]):
    """Successful call: the parsed (and optionally validated) response body."""

    model_config = {"frozen": True}

    success: Literal[True] = True
    data: T

    def is_success(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.data

    def unwrap_or(self, default: Any) -> T:
        return self.data

    def to_envelope(self) -> dict[str, Any]:
        return {"success": True, "data": to_jsonable_python(self.data, by_alias=True)}


class Failure(BaseModel):
    """Failed call: transport, HTTP status, deserialization, or request validation."""

    model_config = {"frozen": True}

    success: Literal[False] = False
    error: ApiError

    def is_success(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        """Raise ResultUnwrapError; a Failure carries no data."""
        raise ResultUnwrapError(self.error)

    def unwrap_or(self, default: D) -> D:
        return default

    def to_envelope(self) -> dict[str, Any]:
        return {"success": False, "error": self.error.model_dump(exclude_none=True)}


Result = Union[Success, Failure]
