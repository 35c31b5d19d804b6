# ============================================================================
# SCHEMA HELPERS
# ============================================================================
# STATUS: Core - Schema validation and record encoding
# PURPOSE: Turn caller input into PrivateSchema and encode records
# CREATED: 19 OCT 2026
# ============================================================================
"""
Schema Helpers

validate_schema() accepts a PrivateSchema or a plain dict and raises
SchemaError for anything malformed. serialize_record() encodes only the
fields a schema declares, as compact UTF-8 JSON.
"""

import json
from typing import Any, Dict, Union

from pydantic import ValidationError

from zkprime.core.errors import SchemaError
from zkprime.core.models import PrivateSchema


def validate_schema(schema: Union[PrivateSchema, Dict[str, Any]]) -> PrivateSchema:
    """
    Validate a schema definition.

    Args:
        schema: PrivateSchema or dict with id, name and fields

    Returns:
        Validated PrivateSchema

    Raises:
        SchemaError if id, name or fields are missing or malformed
    """
    if not isinstance(schema, PrivateSchema):
        try:
            schema = PrivateSchema.model_validate(schema)
        except ValidationError as e:
            raise SchemaError(f"invalid schema: {e.error_count()} validation error(s)") from e

    if not schema.id or not schema.name:
        raise SchemaError("invalid schema: id and name are required")
    if not schema.fields:
        raise SchemaError("invalid schema: at least one field is required")
    for f in schema.fields:
        if not f.name:
            raise SchemaError("invalid schema: every field needs a name")
    return schema


def serialize_record(schema: PrivateSchema, record: Dict[str, Any]) -> bytes:
    """Encode the record's schema fields as compact JSON (unknown keys dropped)."""
    allowed = set(schema.field_names)
    filtered = {k: v for k, v in record.items() if k in allowed}
    return json.dumps(filtered, separators=(",", ":")).encode("utf-8")


__all__ = ["validate_schema", "serialize_record"]
