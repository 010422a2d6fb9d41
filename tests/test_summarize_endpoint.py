from __future__ import annotations

import json

import httpx
import pytest


def _sent_payload(route) -> dict:
    return json.loads(route.calls.last.request.content)


def test_root_endpoint(client):
    resp = client.get("/api/")
    assert resp.status_code == 200
    assert "message" in resp.json()


def test_summarize_returns_chat_reply(client, inference_url, respx_mock):
    route = respx_mock.post(inference_url).mock(
        return_value=httpx.Response(200, json={"message": {"role": "assistant", "content": "**Cells**: units of life"}})
    )

    resp = client.post("/api/summarize", json={"text": "Cells are the basic units of life."})

    assert resp.status_code == 200
    assert resp.json() == {"summary": "**Cells**: units of life"}
    assert route.call_count == 1


def test_summarize_sends_single_turn_non_streamed_request(client, gateway, inference_url, respx_mock):
    route = respx_mock.post(inference_url).mock(return_value=httpx.Response(200, json={"response": "notes"}))
    text = "Mitochondria produce ATP {via} oxidative phosphorylation."

    client.post("/api/summarize", json={"text": text})

    payload = _sent_payload(route)
    assert payload["model"] == gateway.inference_client.model
    assert payload["stream"] is False
    assert len(payload["messages"]) == 1
    assert payload["messages"][0]["role"] == "user"
    assert text in payload["messages"][0]["content"]


def test_summarize_falls_back_to_flat_response_field(client, inference_url, respx_mock):
    respx_mock.post(inference_url).mock(
        return_value=httpx.Response(200, json={"message": {"content": "  "}, "response": "- flat notes"})
    )

    resp = client.post("/api/summarize", json={"text": "Some text"})

    assert resp.status_code == 200
    assert resp.json()["summary"] == "- flat notes"


@pytest.mark.parametrize("body", [{"text": ""}, {"text": "   \n\t "}, {"text": None}, {}, {"text": 42}])
def test_summarize_rejects_blank_input_without_calling_upstream(client, respx_mock, body):
    resp = client.post("/api/summarize", json=body)

    assert resp.status_code == 400
    data = resp.json()
    assert data["error"] is True
    assert data["message"] == "No text found to summarize."
    assert "details" not in data
    assert respx_mock.calls.call_count == 0


def test_summarize_rejects_missing_body(client, respx_mock):
    resp = client.post("/api/summarize")

    assert resp.status_code == 400
    assert resp.json()["error"] is True
    assert respx_mock.calls.call_count == 0


def test_upstream_error_status_is_reported_as_bad_gateway(client, inference_url, respx_mock):
    respx_mock.post(inference_url).mock(return_value=httpx.Response(500, text='{"error":"model not found"}'))

    resp = client.post("/api/summarize", json={"text": "Some text"})

    assert resp.status_code == 502
    data = resp.json()
    assert data["error"] is True
    assert data["message"] == "Inference service responded with an error."
    assert data["details"] == '{"error":"model not found"}'


def test_unreachable_upstream_is_reported_as_bad_gateway(client, inference_url, respx_mock):
    respx_mock.post(inference_url).mock(side_effect=httpx.ConnectError)

    resp = client.post("/api/summarize", json={"text": "Some text"})

    assert resp.status_code == 502
    data = resp.json()
    assert data["error"] is True
    assert data["message"] == "Could not reach the inference service."
    assert data["details"]


@pytest.mark.parametrize(
    "reply",
    [
        {"message": {"content": ""}},
        {"message": {"content": "   "}, "response": "\n"},
        {"response": ""},
        {"done": True},
    ],
)
def test_blank_upstream_reply_is_empty_result(client, inference_url, respx_mock, reply):
    respx_mock.post(inference_url).mock(return_value=httpx.Response(200, json=reply))

    resp = client.post("/api/summarize", json={"text": "Some text"})

    assert resp.status_code == 500
    data = resp.json()
    assert data["error"] is True
    assert data["message"] == "Inference service returned an empty summary."


def test_unexpected_failure_is_internal_error(client, inference_url, respx_mock):
    respx_mock.post(inference_url).mock(return_value=httpx.Response(200, text="<html>not json</html>"))

    resp = client.post("/api/summarize", json={"text": "Some text"})

    assert resp.status_code == 500
    data = resp.json()
    assert data["error"] is True
    assert data["message"]
    assert "summary" not in data
