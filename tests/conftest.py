from __future__ import annotations

import datetime
import json
import logging
from typing import Any, Optional

import pytest

from shared_code import const


class FakeServiceBusMessage:
    """Duck-typed stand-in for func.ServiceBusMessage."""

    def __init__(
        self,
        body: Any,
        message_id: Optional[str] = None,
        delivery_count: Optional[int] = None,
        enqueued_time_utc: Optional[datetime.datetime] = None,
    ) -> None:
        if not isinstance(body, (bytes, str)):
            body = json.dumps(body)
        if isinstance(body, str):
            body = body.encode("utf-8")
        self._body = body
        self.message_id = message_id
        self.delivery_count = delivery_count
        self.enqueued_time_utc = enqueued_time_utc

    def get_body(self) -> bytes:
        return self._body


class FakeContext:
    def __init__(self, invocation_id: str = "inv-1", function_name: str = "ServiceBusQueueTrigger") -> None:
        self.invocation_id = invocation_id
        self.function_name = function_name


@pytest.fixture
def make_message():
    return FakeServiceBusMessage


@pytest.fixture
def make_context():
    return FakeContext


@pytest.fixture
def trace_records(caplog: pytest.LogCaptureFixture):
    caplog.set_level(logging.DEBUG, logger=const.TRACER_NAME)
    return caplog


@pytest.fixture(autouse=True)
def _clean_trace_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (const.SETTING_TRACE_LEVEL, const.SETTING_TRACE_FORMAT, const.SETTING_TRACE_TO_CONSOLE):
        monkeypatch.delenv(name, raising=False)
