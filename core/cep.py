"""
CEP Request Handling

Shared by zipcode_service and weather_service: the request model, the CEP
format check, and the client input errors both services map to 400/422.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

CEP_LENGTH = 8


# =============================================================================
# Client Input Errors
# =============================================================================


class ClientInputError(Exception):
    """Base exception for rejected client input"""
    status_code: int = 400
    detail: str = "Bad request"

    def __init__(self, message: str = None):
        super().__init__(message or self.detail)


class InvalidPayloadError(ClientInputError):
    """Raised when the body does not decode to {"cep": string}"""
    status_code = 400
    detail = "Invalid JSON payload"


class InvalidCepError(ClientInputError):
    """Raised when the CEP is not exactly 8 ASCII digits"""
    status_code = 422
    detail = "invalid zipcode"

    def __init__(self, cep: str):
        self.cep = cep
        super().__init__(f"invalid zipcode: {cep!r}")


# =============================================================================
# Request Model
# =============================================================================


class CEPRequest(BaseModel):
    """
    Inbound {"cep": "01310100"} body.

    The key is matched case-insensitively ("CEP", "Cep"); when several
    spellings are present the last one in the body wins.
    """
    model_config = ConfigDict(frozen=True)

    cep: str = ""

    @model_validator(mode="before")
    @classmethod
    def fold_key_case(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        matches = [key for key in data if isinstance(key, str) and key.lower() == "cep"]
        if not matches:
            return {}
        return {"cep": data[matches[-1]]}

    @field_validator("cep", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


def is_valid_cep(cep: str) -> bool:
    """True iff cep is exactly 8 characters, all ASCII '0'-'9'. No normalization."""
    if len(cep) != CEP_LENGTH:
        return False
    return all("0" <= char <= "9" for char in cep)


def parse_cep_request(body: bytes) -> CEPRequest:
    """
    Decode and validate a raw request body.

    Raises:
        InvalidPayloadError: body is not a JSON object with a string "cep"
        InvalidCepError: "cep" fails is_valid_cep
    """
    try:
        request = CEPRequest.model_validate_json(body)
    except ValidationError as e:
        raise InvalidPayloadError(f"Invalid JSON payload: {e.error_count()} error(s)") from e

    if not is_valid_cep(request.cep):
        raise InvalidCepError(request.cep)

    return request


__all__ = [
    "CEP_LENGTH",
    "ClientInputError",
    "InvalidPayloadError",
    "InvalidCepError",
    "CEPRequest",
    "is_valid_cep",
    "parse_cep_request",
]
