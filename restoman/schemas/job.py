"""Scheduled job result contract."""

from pydantic import BaseModel, ConfigDict, StrictBool


class JobResult(BaseModel):
    """Outcome of one job cycle; extra fields are relayed untouched."""

    success: StrictBool
    message: str | None = None

    model_config = ConfigDict(extra="allow")
