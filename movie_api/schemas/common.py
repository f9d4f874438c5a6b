from pydantic import BaseModel


class Message(BaseModel):
    message: str


class ErrorResponse(BaseModel):
    error: str


# four-digit calendar years; also keeps values inside a 64-bit INTEGER column
MIN_YEAR = 1
MAX_YEAR = 9999
