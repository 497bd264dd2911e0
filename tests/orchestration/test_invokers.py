"""Tests for step invokers and result classification."""

import pytest

from orchestration import LocalMockInvoker, is_success_result


@pytest.mark.parametrize(
    "payload, expected",
    [
        ({"EV_R_CD": "S"}, True),
        ({"EV_TYPE": "SUCCESS"}, True),
        ({"status": "SUCCEEDED"}, True),
        ({"status": 200}, True),
        ({"http_status": 200, "data": {"EV_R_CD": "S"}}, True),
        ({"http_status": 200, "data": {"EV_R_CD": "E"}}, False),
        ({"EV_R_CD": "", "EV_TYPE": "S"}, True),
        ({"EV_R_CD": "E", "status": "SUCCESS"}, False),
        ({"http_status": 500, "data": "Internal Server Error"}, False),
        ({}, False),
        (None, False),
    ],
)
def test_is_success_result(payload, expected):
    assert is_success_result(payload) is expected


@pytest.mark.asyncio
async def test_local_mock_invoker_echoes_request():
    invoker = LocalMockInvoker()

    response = await invoker.invoke("exec-1", "step-1", {"IV_ID": "7"})

    assert response == {
        "EV_R_CD": "S",
        "EV_MESSAGE": "LOCAL_MOCK_SUCCESS",
        "echo": {"IV_ID": "7"},
    }
    assert invoker.target_name == "LOCAL_MOCK"


@pytest.mark.asyncio
async def test_local_mock_invoker_without_payload():
    response = await LocalMockInvoker().invoke("exec-1", "step-1", None)

    assert response["echo"] == {}
