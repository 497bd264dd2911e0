"""Step invokers - StepInvoker protocol, LocalMockInvoker, result checks."""

from typing import Protocol

SUCCESS_CODES = ("S", "SUCCEEDED", "SUCCESS", 200)


class StepInvoker(Protocol):
    """A downstream collaborator whose call is wrapped as a step."""

    target_name: str

    async def invoke(
        self,
        execution_id: str,
        step_id: str,
        request_payload: dict[str, object] | None,
    ) -> dict[str, object]:
        """Call the downstream system.

        Args:
            execution_id: Owning execution
            step_id: Step wrapping this call
            request_payload: Payload to send

        Returns:
            Response payload
        """
        ...


class LocalMockInvoker:
    """Answers every call with a canned success, echoing the request."""

    target_name = "LOCAL_MOCK"

    async def invoke(
        self,
        execution_id: str,
        step_id: str,
        request_payload: dict[str, object] | None,
    ) -> dict[str, object]:
        return {
            "EV_R_CD": "S",
            "EV_MESSAGE": "LOCAL_MOCK_SUCCESS",
            "echo": request_payload or {},
        }


def is_success_result(payload: object) -> bool:
    """Check whether a downstream response reports success.

    Responses wrapped as ``{"http_status": ..., "data": ...}`` are judged
    by their ``data`` member. The first non-empty of ``EV_R_CD``,
    ``EV_TYPE`` and ``status`` decides.

    Args:
        payload: Response payload

    Returns:
        True if the result code is a success code
    """
    if isinstance(payload, dict) and payload.get("data") is not None:
        payload = payload["data"]
    if not isinstance(payload, dict):
        return False

    code = payload.get("EV_R_CD") or payload.get("EV_TYPE") or payload.get("status")
    return code in SUCCESS_CODES
