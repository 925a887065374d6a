from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError, field_validator

from .errors import ErrorKind, FetchError


class ApiResponse(BaseModel):
    """Decoded body of the hobbies endpoint."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    hobbies: List[StrictStr]
    # None means the key was absent; an explicit null is rejected below
    challenge_token: Optional[StrictStr] = Field(default=None, alias="challengeToken")

    @field_validator("challenge_token", mode="before")
    @classmethod
    def _reject_null_token(cls, value):
        if value is None:
            raise ValueError("challengeToken must be a string, got null")
        return value

    @property
    def has_token(self) -> bool:
        return self.challenge_token is not None


def _describe(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        location = ".".join(str(part) for part in err["loc"]) or "body"
        parts.append(f"{location}: {err['msg']}")
    return "; ".join(parts)


def parse_response(body: str) -> ApiResponse:
    """Decode a JSON body into an ApiResponse, raising ParseError on any malformed input."""
    try:
        return ApiResponse.model_validate_json(body)
    except ValidationError as e:
        raise FetchError(ErrorKind.PARSE, _describe(e)) from e
