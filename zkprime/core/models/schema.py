# ============================================================================
# PRIVATE SCHEMA MODEL
# ============================================================================
# STATUS: Core model - Local record schema metadata
# PURPOSE: Describe field names/types of a private-state record
# LAST_REVIEWED: 19 OCT 2026
# EXPORTS: SchemaField, PrivateSchema
# DEPENDENCIES: pydantic
# ============================================================================
"""
Private Schema Model

A schema is local metadata only: it is registered with a client, kept in
memory, and never written on-chain by the SDK.
"""

from typing import List

from pydantic import BaseModel, Field

from zkprime.core.contracts import FieldType


class SchemaField(BaseModel):
    """One named, typed field of a private record."""

    name: str = Field(..., description="Field name inside the record")
    type: FieldType = Field(..., description="Type tag (u64, string, bytes, boolean)")

    model_config = {"frozen": True}


class PrivateSchema(BaseModel):
    """
    Record schema registered with a PrivateStateService.

    Lifecycle:
        Defined by define_schema(), held in the client registry,
        discarded when the client is closed.
    """

    id: str = Field(..., description="Unique schema identifier")
    name: str = Field(..., description="Human-readable schema name")
    fields: List[SchemaField] = Field(..., description="Ordered field list")

    model_config = {"frozen": True}

    @property
    def field_names(self) -> List[str]:
        """Field names in declaration order."""
        return [f.name for f in self.fields]


__all__ = ["SchemaField", "PrivateSchema"]
