"""
Pytest Configuration and Shared Fixtures

Everything runs without a network: HTTP goes through httpx.MockTransport
and history lives in a MemoryStore unless a test asks for a file.
"""
import json

import httpx
import pytest

from askbox.core import GenerateClient, HistoryStore, MemoryStore, QueryPipeline

API_URL = "https://example.test/v1/models/demo:generateContent"


def reply_document(text):
    """Build a response body shaped like the endpoint's reply."""
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


class RecordingHandler:
    """MockTransport handler that remembers every request it saw."""

    def __init__(self, response=None, exc=None):
        self.response = response if response is not None else httpx.Response(200, json=reply_document("ok"))
        self.exc = exc
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.exc is not None:
            raise self.exc
        return self.response

    @property
    def payloads(self):
        return [json.loads(r.content) for r in self.requests]


class ReadOnlyStore(MemoryStore):
    """Store whose writes fail the way a read-only disk does."""

    def set(self, key, value):
        raise OSError("read-only")

    def delete(self, key):
        raise OSError("read-only")


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def history(memory_store):
    return HistoryStore(memory_store)


@pytest.fixture
def handler():
    return RecordingHandler()


@pytest.fixture
def make_client():
    def _make(handler, url=API_URL):
        return GenerateClient(url, transport=httpx.MockTransport(handler))
    return _make


@pytest.fixture
def make_pipeline(history, make_client):
    def _make(handler, events_q=None):
        return QueryPipeline(history, make_client(handler), events_q=events_q)
    return _make
