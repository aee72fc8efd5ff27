from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field
from datetime import datetime, timezone


class ErrorItem(BaseModel):
    msg: str
    code: Optional[str] = None
    field: Optional[str] = None


class ErrorResponse(BaseModel):
    """Body returned by every exception handler."""

    success: bool = False
    errors: List[ErrorItem]
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary with JSON-serializable values."""
        return self.model_dump(mode="json", exclude_none=True)

    @classmethod
    def of(cls, message: str, code: Optional[str] = None) -> "ErrorResponse":
        return cls(errors=[ErrorItem(msg=message, code=code)])
