"""Response envelopes shared by every endpoint."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class DataEnvelope(BaseModel, Generic[T]):
    """Successful response: ``{"data": ...}``."""

    data: T


class ErrorBody(BaseModel):
    code: str | None = None
    message: str
    fields: dict[str, str] | None = None


class ErrorEnvelope(BaseModel):
    """Failed response: ``{"error": {"message": ...}}``.

    Validation failures also carry ``code`` and a per-field ``fields`` map.
    """

    error: ErrorBody = Field(description="Error details")

    @classmethod
    def build(
        cls,
        message: str,
        code: str | None = None,
        fields: dict[str, str] | None = None,
    ) -> "ErrorEnvelope":
        return cls(error=ErrorBody(code=code, message=message, fields=fields))

    def content(self) -> dict:
        return self.model_dump(exclude_none=True)
