"""Turn raw request bodies into schema instances."""
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from readsync.core.errors import BadRequest

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def decode_body(schema: type[SchemaT], body: bytes) -> SchemaT:
    """Parse a JSON object body; anything malformed becomes BadRequest."""
    try:
        return schema.model_validate_json(body)
    except ValidationError as exc:
        raise BadRequest() from exc
