"""Tests for OrchestrationService - the tracking call contract."""

from core.application.commands import (
    HeartbeatCommand,
    RegisterAgentCommand,
    StartExecutionCommand,
    StartStepCommand,
)
from core.domain.enums import ExecutionStatus, StepStatus


def test_end_to_end_single_step_execution(service):
    """Test register -> execution -> step -> end step -> end execution -> detail."""
    service.register_agent(RegisterAgentCommand(agent_id="a1", agent_name="A"))

    execution = service.start_execution(StartExecutionCommand(agent_id="a1"))
    assert execution.status == ExecutionStatus.RUNNING

    step = service.start_step(
        execution.execution_id,
        StartStepCommand(step_seq=1, step_name="call-x", step_type="rpc"),
    )
    assert step.status == StepStatus.RUNNING

    service.end_step(step.step_id, StepStatus.SUCCEEDED, {"result": "ok"})
    service.end_execution(execution.execution_id, ExecutionStatus.SUCCEEDED)

    detail = service.get_execution_detail(execution.execution_id)

    assert detail.execution.status == ExecutionStatus.SUCCEEDED
    assert [s.step_id for s in detail.steps] == [step.step_id]
    assert detail.steps[0].status == StepStatus.SUCCEEDED
    assert detail.steps[0].response_payload == {"result": "ok"}
    assert len(detail.events) == 4


def test_not_found_sentinels(service):
    """Test unknown ids come back as None from every lookup operation."""
    assert service.end_execution("missing", ExecutionStatus.FAILED) is None
    assert service.start_step(
        "missing", StartStepCommand(step_seq=1, step_name="x", step_type="rpc")
    ) is None
    assert service.end_step("missing", StepStatus.FAILED) is None
    assert service.get_execution_detail("missing") is None


def test_detail_is_a_snapshot(service):
    """Test a detail view does not change after later mutations."""
    execution = service.start_execution(StartExecutionCommand(agent_id="a1"))
    detail = service.get_execution_detail(execution.execution_id)

    service.end_execution(execution.execution_id, ExecutionStatus.SUCCEEDED)

    assert detail.execution.status == ExecutionStatus.RUNNING
    assert len(detail.events) == 1


def test_heartbeats_are_independent_of_executions(service):
    """Test heartbeats neither need nor create executions."""
    heartbeat = service.upsert_heartbeat(
        HeartbeatCommand(worker_id="w1", host="node-1", env="dev", meta={"pid": 42})
    )

    assert heartbeat.meta == {"pid": 42}
    assert [hb.worker_id for hb in service.list_heartbeats()] == ["w1"]
    assert service.store.counts()["executions"] == 0
