from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class ExecutionResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    execution_time: float = Field(..., alias="executionTime", ge=0, description="Elapsed milliseconds")
    error: str | None = None

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class ValidationResult(BaseModel):
    valid: bool
    error: str | None = None

    def to_json(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)
