import httpx
import pytest


def completion_payload(*choices):
    """Chat completion body; str choices become assistant messages, dicts are used as-is."""
    return {
        "id": "chatcmpl-1",
        "object": "chat.completion",
        "created": 0,
        "model": "test-model",
        "choices": [
            c
            if isinstance(c, dict)
            else {
                "index": i,
                "message": {"role": "assistant", "content": c},
                "finish_reason": "stop",
            }
            for i, c in enumerate(choices)
        ],
    }


@pytest.fixture
def completion():
    return completion_payload


@pytest.fixture
def api_client():
    """Factory for an httpx client whose API answers with the given choices."""

    def make(*choices):
        payload = completion_payload(*choices)
        return httpx.AsyncClient(
            transport=httpx.MockTransport(lambda request: httpx.Response(200, json=payload))
        )

    return make
