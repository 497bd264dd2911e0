"""
Integration tests for the execution tracking endpoints.
"""
from fastapi.testclient import TestClient

from api.dependencies import get_orchestration_service
from core.application.commands import StartExecutionCommand


# =============================================================================
# AGENTS
# =============================================================================

def test_default_agent_registered_on_startup(test_client: TestClient):
    """Test the service registers its own agent identity at startup."""
    response = test_client.get("/health/ready")

    assert response.status_code == 200
    assert response.json()["store"]["agents"] == 1


def test_health_check(test_client: TestClient):
    """Test liveness endpoint reports the service name."""
    response = test_client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["service"] == "subflow-tracker"


def test_register_agent(test_client: TestClient):
    response = test_client.post("/v1/agents", json={"agent_id": "a1", "agent_name": "A"})

    assert response.status_code == 201
    body = response.json()
    assert body["agent_id"] == "a1"
    assert body["agent_type"] == "SUBFLOW_MANAGER"
    assert body["created_at"] == body["updated_at"]


def test_reregister_agent_keeps_created_at(test_client: TestClient):
    first = test_client.post("/v1/agents", json={"agent_id": "a1", "agent_name": "A"}).json()
    second = test_client.post(
        "/v1/agents", json={"agent_id": "a1", "agent_name": "B", "agent_type": "ORCHESTRATOR"}
    ).json()

    assert second["created_at"] == first["created_at"]
    assert second["agent_name"] == "B"
    assert second["agent_type"] == "ORCHESTRATOR"


def test_register_agent_missing_name_is_400(test_client: TestClient):
    response = test_client.post("/v1/agents", json={"agent_id": "a1"})

    assert response.status_code == 400


def test_register_agent_empty_id_is_400(test_client: TestClient):
    response = test_client.post("/v1/agents", json={"agent_id": "", "agent_name": "A"})

    assert response.status_code == 400


# =============================================================================
# EXECUTIONS
# =============================================================================

def test_start_execution(test_client: TestClient):
    response = test_client.post(
        "/v1/executions",
        json={"agent_id": "a1", "request_id": "r-1", "input_payload": {"q": "hi"}},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["status"] == "RUNNING"
    assert body["request_id"] == "r-1"
    assert body["input_payload"] == {"q": "hi"}
    assert body["ended_at"] is None


def test_start_execution_missing_agent_id_is_400(test_client: TestClient):
    response = test_client.post("/v1/executions", json={"channel": "web"})

    assert response.status_code == 400


def test_end_execution(test_client: TestClient, execution_id: str):
    response = test_client.patch(
        f"/v1/executions/{execution_id}/end",
        json={"status": "FAILED", "error_code": "E1", "error_message": "boom"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "FAILED"
    assert body["error_code"] == "E1"
    assert body["error_message"] == "boom"
    assert body["duration_ms"] >= 0


def test_end_execution_missing_status_is_400(test_client: TestClient, execution_id: str):
    response = test_client.patch(f"/v1/executions/{execution_id}/end", json={})

    assert response.status_code == 400


def test_end_execution_running_status_is_400(test_client: TestClient, execution_id: str):
    response = test_client.patch(
        f"/v1/executions/{execution_id}/end", json={"status": "RUNNING"}
    )

    assert response.status_code == 400


def test_end_execution_unknown_is_404(test_client: TestClient):
    response = test_client.patch("/v1/executions/missing/end", json={"status": "SUCCEEDED"})

    assert response.status_code == 404
    assert response.json()["detail"] == "execution not found"


def test_get_execution_unknown_is_404(test_client: TestClient):
    response = test_client.get("/v1/executions/missing")

    assert response.status_code == 404


# =============================================================================
# STEPS
# =============================================================================

def test_start_step_unknown_execution_is_404(test_client: TestClient):
    response = test_client.post(
        "/v1/executions/missing/steps",
        json={"step_seq": 1, "step_name": "call-x", "step_type": "rpc"},
    )

    assert response.status_code == 404


def test_start_step_missing_fields_is_400(test_client: TestClient, execution_id: str):
    response = test_client.post(
        f"/v1/executions/{execution_id}/steps", json={"step_seq": 1, "step_name": "call-x"}
    )

    assert response.status_code == 400


def test_end_step_unknown_is_404(test_client: TestClient):
    response = test_client.patch("/v1/steps/missing/end", json={"status": "SUCCEEDED"})

    assert response.status_code == 404
    assert response.json()["detail"] == "step not found"


def test_end_step_overrides_duration_metric(test_client: TestClient, execution_id: str):
    step = test_client.post(
        f"/v1/executions/{execution_id}/steps",
        json={"step_seq": 1, "step_name": "call-x", "step_type": "rpc", "retry_count": 2},
    ).json()
    assert step["retry_count"] == 2

    response = test_client.patch(
        f"/v1/steps/{step['step_id']}/end",
        json={"status": "SUCCEEDED", "metrics": {"duration_ms": -1, "rows": 3}},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["metrics"]["duration_ms"] == body["duration_ms"]
    assert body["metrics"]["duration_ms"] >= 0
    assert body["metrics"]["rows"] == 3


# =============================================================================
# EXECUTION DETAIL
# =============================================================================

def test_full_lifecycle_detail(test_client: TestClient, execution_id: str):
    """Test steps come back ordered by step_seq and events by time."""
    step_ids = {}
    for seq in (3, 1, 2):
        response = test_client.post(
            f"/v1/executions/{execution_id}/steps",
            json={"step_seq": seq, "step_name": f"s{seq}", "step_type": "rpc"},
        )
        assert response.status_code == 201
        step_ids[seq] = response.json()["step_id"]

    for seq in (3, 1, 2):
        test_client.patch(
            f"/v1/steps/{step_ids[seq]}/end",
            json={"status": "SUCCEEDED", "response_payload": {"result": "ok"}},
        )
    test_client.patch(f"/v1/executions/{execution_id}/end", json={"status": "SUCCEEDED"})

    response = test_client.get(f"/v1/executions/{execution_id}")

    assert response.status_code == 200
    detail = response.json()
    assert detail["execution"]["status"] == "SUCCEEDED"
    assert [s["step_seq"] for s in detail["steps"]] == [1, 2, 3]
    assert all(s["status"] == "SUCCEEDED" for s in detail["steps"])

    event_types = [e["event_type"] for e in detail["events"]]
    assert len(event_types) == 8
    assert event_types[0] == "EXECUTION_STARTED"
    assert event_types[-1] == "EXECUTION_ENDED"
    assert event_types.count("STEP_STARTED") == 3
    assert event_types.count("STEP_ENDED") == 3


def test_list_payloads_round_trip(test_client: TestClient):
    """Test non-object JSON payloads are stored and returned as given."""
    response = test_client.post(
        "/v1/executions", json={"agent_id": "a1", "input_payload": [1, 2], "meta": "tag"}
    )
    assert response.status_code == 201
    execution_id = response.json()["execution_id"]

    step = test_client.post(
        f"/v1/executions/{execution_id}/steps",
        json={"step_seq": 1, "step_name": "s1", "step_type": "rpc", "request_payload": ["a"]},
    ).json()
    response = test_client.patch(
        f"/v1/steps/{step['step_id']}/end",
        json={"status": "SUCCEEDED", "response_payload": [{"ok": True}], "metrics": [7]},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["metrics"] == {"value": [7], "duration_ms": body["duration_ms"]}

    detail = test_client.get(f"/v1/executions/{execution_id}").json()

    assert detail["execution"]["input_payload"] == [1, 2]
    assert detail["execution"]["meta"] == "tag"
    assert detail["steps"][0]["request_payload"] == ["a"]
    assert detail["steps"][0]["response_payload"] == [{"ok": True}]


def test_detail_renders_payloads_stored_in_process(test_client: TestClient):
    """Test payloads written through the shared service render over HTTP."""
    service = get_orchestration_service()
    execution = service.start_execution(
        StartExecutionCommand(agent_id="worker-agent", input_payload=[1, 2], meta=42)
    )

    response = test_client.get(f"/v1/executions/{execution.execution_id}")

    assert response.status_code == 200
    assert response.json()["execution"]["input_payload"] == [1, 2]
    assert response.json()["execution"]["meta"] == 42


# =============================================================================
# HEARTBEATS
# =============================================================================

def test_heartbeat_upsert_and_list(test_client: TestClient):
    for worker_id in ("w1", "w2"):
        response = test_client.post(
            "/v1/workers/heartbeat",
            json={"worker_id": worker_id, "host": "node-1", "env": "dev"},
        )
        assert response.status_code == 200

    response = test_client.get("/v1/workers/heartbeat")

    assert response.status_code == 200
    workers = response.json()["workers"]
    assert {w["worker_id"] for w in workers} == {"w1", "w2"}


def test_heartbeat_ignores_client_timestamp(test_client: TestClient):
    response = test_client.post(
        "/v1/workers/heartbeat",
        json={
            "worker_id": "w1",
            "host": "node-1",
            "env": "dev",
            "last_seen_at": "1999-01-01T00:00:00Z",
        },
    )

    assert response.status_code == 200
    assert not response.json()["last_seen_at"].startswith("1999")


def test_heartbeat_missing_env_is_400(test_client: TestClient):
    response = test_client.post("/v1/workers/heartbeat", json={"worker_id": "w1", "host": "h"})

    assert response.status_code == 400
