import json
import logging
from typing import Any, Dict, Literal

from pydantic import Field

import config

from .action import Action, ActionType, Context

logger = logging.getLogger(__name__)


class SendEmailAction(Action):
    type: Literal[ActionType.SEND_EMAIL] = Field(default=ActionType.SEND_EMAIL, frozen=True)
    sender: str = Field(..., description="From address")
    receiver: str = Field(..., description="To address")
    subject: str | None = None
    body: str | None = None

    async def execute(self, context: Context | None = None) -> None:
        logger.info(f"[EMAIL] Sending email from: {self.sender} to: {self.receiver}")
        if self.subject:
            logger.info(f"[EMAIL] Subject: {self.subject}")
        if self.body:
            logger.info(f"[EMAIL] Body: {self.body}")
        if context is not None and config.LOG_CONTEXT:
            logger.info(f"[EMAIL] Context: {json.dumps(dict(context), indent=2, default=str)}")

    def validate(self) -> bool:
        return bool(self.sender) and bool(self.receiver)

    def to_json(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "sender": self.sender,
            "receiver": self.receiver,
            "subject": self.subject,
            "body": self.body,
        }
