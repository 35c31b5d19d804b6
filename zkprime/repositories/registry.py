# ============================================================================
# CLIENT REGISTRY
# ============================================================================
# STATUS: Core - In-memory registries owned by one client
# PURPOSE: Schemas, job types and mock job records
# CREATED: 19 OCT 2026
# ============================================================================
"""
Client Registry

Plain dict-backed storage for everything the SDK keeps in memory:

- schemas      (schema id -> PrivateSchema)
- job types    (job type name -> JobDefinition)
- mock jobs    (job id -> JobRecord), used only without a coordinator

One ClientRegistry belongs to one ZkPrimeClient and is cleared when the
client closes. Writes are last-write-wins; there is no locking, so
overlapping coroutine writes to the same key simply overwrite.
"""

import logging
from typing import Dict, List, Optional

from zkprime.core.errors import NotFoundError
from zkprime.core.models import JobDefinition, JobRecord, PrivateSchema

logger = logging.getLogger(__name__)


class ClientRegistry:
    """In-memory registry for one client instance."""

    def __init__(self):
        self._schemas: Dict[str, PrivateSchema] = {}
        self._job_types: Dict[str, JobDefinition] = {}
        self._mock_jobs: Dict[str, JobRecord] = {}

    # ------------------------------------------------------------------
    # SCHEMAS
    # ------------------------------------------------------------------

    def put_schema(self, schema: PrivateSchema) -> PrivateSchema:
        if schema.id in self._schemas:
            logger.debug(f"Overwriting schema {schema.id}")
        self._schemas[schema.id] = schema
        return schema

    def get_schema(self, schema_id: str) -> Optional[PrivateSchema]:
        return self._schemas.get(schema_id)

    def get_schema_or_raise(self, schema_id: str) -> PrivateSchema:
        """
        Get a schema, raising if not registered.

        Raises:
            NotFoundError if schema not found
        """
        schema = self._schemas.get(schema_id)
        if schema is None:
            raise NotFoundError(f"schema {schema_id} not found", entity_id=schema_id)
        return schema

    def list_schemas(self) -> List[PrivateSchema]:
        return list(self._schemas.values())

    # ------------------------------------------------------------------
    # JOB TYPES
    # ------------------------------------------------------------------

    def put_job_type(self, definition: JobDefinition) -> JobDefinition:
        if definition.name in self._job_types:
            logger.debug(f"Overwriting job type {definition.name}")
        self._job_types[definition.name] = definition
        return definition

    def get_job_type(self, name: str) -> Optional[JobDefinition]:
        return self._job_types.get(name)

    def list_job_types(self) -> List[JobDefinition]:
        return list(self._job_types.values())

    # ------------------------------------------------------------------
    # MOCK JOBS
    # ------------------------------------------------------------------

    def save_job(self, record: JobRecord) -> JobRecord:
        self._mock_jobs[record.id] = record
        return record

    def get_job(self, job_id: str) -> Optional[JobRecord]:
        return self._mock_jobs.get(job_id)

    # ------------------------------------------------------------------
    # TEARDOWN
    # ------------------------------------------------------------------

    def clear(self) -> None:
        """Drop all registered state."""
        counts = (len(self._schemas), len(self._job_types), len(self._mock_jobs))
        self._schemas.clear()
        self._job_types.clear()
        self._mock_jobs.clear()
        logger.debug(
            f"Cleared registry: {counts[0]} schemas, {counts[1]} job types, {counts[2]} mock jobs"
        )


__all__ = ["ClientRegistry"]
