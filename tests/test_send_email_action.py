"""Tests for SendEmailAction"""

import pytest

from models import ActionType, SendEmailAction


class TestSendEmailAction:
    def test_construction(self):
        action = SendEmailAction(sender="a@example.com", receiver="b@example.com")
        assert action.type is ActionType.SEND_EMAIL
        assert action.subject is None
        assert action.body is None

    @pytest.mark.asyncio
    async def test_execute_logs_envelope(self, info_logs):
        action = SendEmailAction(
            sender="service@example.com",
            receiver="user@example.com",
            subject="Hello",
            body="World",
        )

        await action.execute()

        assert "[EMAIL] Sending email from: service@example.com to: user@example.com" in info_logs.messages
        assert "[EMAIL] Subject: Hello" in info_logs.messages
        assert "[EMAIL] Body: World" in info_logs.messages

    @pytest.mark.asyncio
    async def test_execute_skips_missing_subject_and_body(self, info_logs):
        await SendEmailAction(sender="a@example.com", receiver="b@example.com").execute()

        assert not any(m.startswith("[EMAIL] Subject") for m in info_logs.messages)
        assert not any(m.startswith("[EMAIL] Body") for m in info_logs.messages)

    @pytest.mark.parametrize(
        "sender, receiver, expected",
        [
            ("a@example.com", "b@example.com", True),
            ("", "b@example.com", False),
            ("a@example.com", "", False),
            ("", "", False),
        ],
    )
    def test_validate(self, sender, receiver, expected):
        assert SendEmailAction(sender=sender, receiver=receiver).validate() is expected

    def test_to_json(self):
        action = SendEmailAction(sender="a@example.com", receiver="b@example.com", subject="Hi")

        assert action.to_json() == {
            "type": "send_email",
            "sender": "a@example.com",
            "receiver": "b@example.com",
            "subject": "Hi",
            "body": None,
        }
