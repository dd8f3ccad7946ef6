import json
import logging
from typing import Any, Dict, Literal

from pydantic import Field

import config

from .action import Action, ActionType, Context

logger = logging.getLogger(__name__)


class SendSmsAction(Action):
    type: Literal[ActionType.SEND_SMS] = Field(default=ActionType.SEND_SMS, frozen=True)
    phone_number: str = Field(..., alias="phoneNumber", description="Destination number")
    message: str | None = Field(default=None, description="SMS text")

    async def execute(self, context: Context | None = None) -> None:
        logger.info(f"[SMS] Sending SMS to: {self.phone_number}")
        if self.message:
            logger.info(f"[SMS] Message: {self.message}")
        if context is not None and config.LOG_CONTEXT:
            logger.info(f"[SMS] Context: {json.dumps(dict(context), indent=2, default=str)}")

    def validate(self) -> bool:
        return bool(self.phone_number)

    def to_json(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "phoneNumber": self.phone_number,
            "message": self.message,
        }
