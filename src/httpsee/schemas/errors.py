"""
Failure outcomes of a request, plus the usage error raised at dispatch time.
"""

from typing import Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .response import Response


class UsageError(ValueError):
    """Raised synchronously for caller or configuration mistakes."""


class TransportError(BaseModel):
    """
    The engine never obtained an HTTP response (connection, DNS, TLS, timeout).
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["transport"] = "transport"
    code: str = Field(description="Engine-specific diagnostic code")
    message: str = Field(default="", description="Human-readable diagnostic")

    def describe(self) -> str:
        if self.message:
            return f"{self.code}: {self.message}"
        return self.code


class HttpError(BaseModel):
    """
    An HTTP response was obtained, but its status is outside 2xx.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["http"] = "http"
    response: Response = Field(description="The failing response")

    def describe(self) -> str:
        return f"{self.response.version} {self.response.status_code}"


ErrorResult = Union[TransportError, HttpError]
