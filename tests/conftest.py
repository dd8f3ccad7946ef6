import logging

import pytest

from expressions import clear_expression_parse_cache
from tests.helpers import RecordingAction


@pytest.fixture(autouse=True)
def _reset_parse_cache():
    clear_expression_parse_cache()
    yield


@pytest.fixture
def info_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """caplog capturing INFO and above."""
    caplog.set_level(logging.INFO)
    return caplog


@pytest.fixture
def recorder() -> RecordingAction:
    return RecordingAction()


@pytest.fixture
def sms_payload() -> dict:
    return {
        "type": "send_sms",
        "phoneNumber": "+1234567890",
        "message": "Hello",
    }


@pytest.fixture
def email_payload() -> dict:
    return {
        "type": "send_email",
        "sender": "service@example.com",
        "receiver": "user@example.com",
        "subject": "Welcome",
        "body": "Thanks for signing up",
    }


@pytest.fixture
def hot_weather_tree() -> dict:
    return {
        "rootAction": {
            "type": "condition",
            "expression": "temperature > 30",
            "trueAction": {"type": "send_sms", "phoneNumber": "+1", "message": "Hot"},
        },
        "context": {"temperature": 35},
    }
