"""Request Validation

Request parameters are dataclasses whose fields carry pydantic constraints.
Building one never fails; the constraints are checked with a TypeAdapter when
an operation runs, so a failure can name the operation that received it.
"""

from dataclasses import asdict
from functools import lru_cache
from typing import Annotated, Any, TypeVar

from pydantic import AfterValidator, Field, TypeAdapter, ValidationError
from pydantic_core import PydanticCustomError

T = TypeVar("T")


def _present(value: Any) -> Any:
    if value is None:
        raise PydanticCustomError("missing", "Field required")
    return value


# Marks an optional-typed field as required when sent
Required = AfterValidator(_present)

ID = Annotated[int, Field(gt=0)]
Text = Annotated[str, Field(min_length=1)]
Name = Annotated[str, Field(min_length=1, max_length=32)]
Content = Annotated[bytes, Field(min_length=1)]


@lru_cache
def _adapter(cls: type) -> TypeAdapter:
    return TypeAdapter(cls)


def validate_request(request: T) -> T:
    """
    Validate a request dataclass against its field constraints

    Returns a validated copy, with enum values coerced.

    Raises:
        pydantic.ValidationError: a constraint failed
    """
    return _adapter(type(request)).validate_python(asdict(request))


def field_errors(exc: ValidationError) -> dict[str, str]:
    """Map pydantic errors to dotted field path -> message"""
    return {".".join(str(loc) for loc in err["loc"]) or "request": err["msg"] for err in exc.errors()}
