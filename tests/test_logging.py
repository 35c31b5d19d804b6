# ============================================================================
# STRUCTURED LOGGING TESTS
# ============================================================================
# STATUS: Tests - Log context and formatters
# PURPOSE: Verify context nesting, task isolation and JSON output
# CREATED: 19 OCT 2026
# ============================================================================
"""
Structured Logging Tests

Run with:
    pytest tests/test_logging.py -v
"""

import asyncio
import json
import logging

from zkprime.core.logging import (
    HumanFormatter,
    StructuredFormatter,
    get_current_context,
    log_context,
)


def _record(message: str = "hello") -> logging.LogRecord:
    return logging.LogRecord("zkprime.test", logging.INFO, __file__, 10, message, None, None)


class TestLogContext:

    def test_nested_contexts_merge_and_restore(self):
        with log_context(job_id="j1", operation="submit_job"):
            with log_context(state_id="s1"):
                ctx = get_current_context()
                assert ctx.job_id == "j1"
                assert ctx.state_id == "s1"
                assert ctx.operation == "submit_job"
            assert get_current_context().state_id is None
        assert get_current_context().job_id is None

    def test_extra_fields(self):
        with log_context(extra={"circuit": "c1"}):
            assert get_current_context().to_dict() == {"circuit": "c1"}

    def test_tasks_do_not_share_context(self):
        async def worker(job_id: str):
            with log_context(job_id=job_id):
                await asyncio.sleep(0)
                return get_current_context().job_id

        async def run_both():
            return await asyncio.gather(worker("a"), worker("b"))

        assert asyncio.run(run_both()) == ["a", "b"]


class TestFormatters:

    def test_structured_includes_context(self):
        with log_context(job_id="j1", operation="submit_job"):
            line = StructuredFormatter().format(_record())
        data = json.loads(line)
        assert data["message"] == "hello"
        assert data["level"] == "INFO"
        assert data["context"] == {"job_id": "j1", "operation": "submit_job"}

    def test_structured_without_context(self):
        data = json.loads(StructuredFormatter().format(_record()))
        assert "context" not in data

    def test_human_inline_context(self):
        with log_context(state_id="s1", operation="create_state"):
            line = HumanFormatter().format(_record())
        assert "[state=s1, op=create_state]" in line
        assert line.endswith("zkprime.test [state=s1, op=create_state]: hello")
