# ============================================================================
# COORDINATOR HTTP CLIENT
# ============================================================================
# STATUS: Infrastructure - Async HTTP client for the proving coordinator
# PURPOSE: Proof generation, job submission, status and result retrieval
# CREATED: 19 OCT 2026
# ============================================================================
"""
Coordinator HTTP Client

Async httpx client for the external coordinator / prover:

    POST /generate-proof        {stateId, circuit, ciphertext, iv, tag}
    POST /submit-job            {jobId, jobType, owner, iv, tag, ciphertext}
    GET  /job-status/{jobId}    -> {status}
    GET  /job-result/{jobId}    -> {iv, ciphertext, tag}

All methods return (status_code, response_dict) tuples; the calling
service decides whether a failure raises, falls back, or is only
reported. Network failures are mapped to gateway-style codes (502
unreachable, 504 timeout) so callers deal with a single shape.
No retries are attempted.
"""

import logging
from typing import Any, Dict, Optional, Tuple

import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = httpx.Timeout(30.0)


def is_success(status_code: int) -> bool:
    """True for 2xx responses."""
    return 200 <= status_code < 300


class CoordinatorClient:
    """Async HTTP client for the coordinator API."""

    def __init__(
        self,
        base_url: str,
        timeout: Optional[httpx.Timeout] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize coordinator client.

        Args:
            base_url: Coordinator base URL
            timeout: Request timeout (DEFAULT_TIMEOUT when None)
            transport: Optional httpx transport (tests inject MockTransport)
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout or DEFAULT_TIMEOUT
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._base_url

    async def _request(
        self,
        method: str,
        path: str,
        json_body: Optional[Dict[str, Any]] = None,
    ) -> Tuple[int, Dict[str, Any]]:
        """
        Make a request to the coordinator.

        Returns (status_code, response_body_dict).
        An empty body is returned as {}.
        A 2xx body that is not a JSON object returns (502, error_dict).
        On connection or other request failure, returns (502, error_dict).
        On timeout, returns (504, error_dict).
        """
        url = f"{self._base_url}{path}"

        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                resp = await client.request(method, url, json=json_body)

            try:
                body = resp.json() if resp.content else {}
            except ValueError:
                body = {"detail": resp.text}
                if is_success(resp.status_code):
                    logger.error(f"Coordinator sent non-JSON {resp.status_code}: {path}")
                    return 502, {"error": "Invalid coordinator response", "detail": resp.text[:200]}

            if not isinstance(body, dict):
                if is_success(resp.status_code):
                    logger.error(f"Coordinator sent non-object {resp.status_code}: {path}")
                    return 502, {"error": "Invalid coordinator response", "detail": body}
                body = {"detail": body}

            if resp.status_code >= 500:
                logger.error(f"Coordinator error {resp.status_code}: {path} -> {body}")
            return resp.status_code, body

        except httpx.TimeoutException as e:
            logger.error(f"Coordinator timeout: {url}: {e}")
            return 504, {"error": "Coordinator timeout", "detail": str(e)}
        except httpx.ConnectError as e:
            logger.error(f"Cannot reach coordinator at {url}: {e}")
            return 502, {"error": "Coordinator unreachable", "detail": str(e)}
        except httpx.HTTPError as e:
            logger.error(f"Coordinator request failed: {url}: {e}")
            return 502, {"error": "Coordinator request failed", "detail": str(e)}
        except Exception as e:
            logger.exception(f"Unexpected error calling coordinator at {url}: {e}")
            return 502, {"error": "Coordinator request failed", "detail": str(e)}

    # ------------------------------------------------------------------
    # PROOFS
    # ------------------------------------------------------------------

    async def generate_proof(self, body: Dict[str, Any]) -> Tuple[int, Dict[str, Any]]:
        """POST /generate-proof"""
        return await self._request("POST", "/generate-proof", json_body=body)

    # ------------------------------------------------------------------
    # JOBS
    # ------------------------------------------------------------------

    async def submit_job(self, body: Dict[str, Any]) -> Tuple[int, Dict[str, Any]]:
        """POST /submit-job"""
        return await self._request("POST", "/submit-job", json_body=body)

    async def get_job_status(self, job_id: str) -> Tuple[int, Dict[str, Any]]:
        """GET /job-status/{job_id}"""
        return await self._request("GET", f"/job-status/{job_id}")

    async def get_job_result(self, job_id: str) -> Tuple[int, Dict[str, Any]]:
        """GET /job-result/{job_id}"""
        return await self._request("GET", f"/job-result/{job_id}")


__all__ = ["CoordinatorClient", "DEFAULT_TIMEOUT", "is_success"]
