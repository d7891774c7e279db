from __future__ import annotations

import json
import pathlib

from shared_code import const

ROOT = pathlib.Path(__file__).resolve().parent.parent


def _bindings():
    return json.loads((ROOT / "ServiceBusQueueTrigger" / "function.json").read_text())["bindings"]


def test_trigger_binding_reads_queue_and_connection_from_settings() -> None:
    (binding,) = _bindings()

    assert binding["type"] == "serviceBusTrigger"
    assert binding["direction"] == "in"
    assert binding["name"] == "msg"
    assert binding["queueName"] == "%" + const.SETTING_QUEUE_NAME + "%"
    assert binding["connection"] == const.SETTING_CONNECTION


def test_host_timeout_outlasts_processing_delay() -> None:
    host = json.loads((ROOT / "host.json").read_text())
    hours, minutes, seconds = (int(part) for part in host["functionTimeout"].split(":"))

    assert hours * 3600 + minutes * 60 + seconds > const.PROCESSING_DELAY_SECONDS
