from pydantic import BaseModel, ConfigDict

GREETING: str = "Hi there"


class ServiceResult(BaseModel):
    """Response record built, serialized and discarded per request."""

    model_config = ConfigDict(frozen=True)

    FormattedTime: str
    Greeting: str = GREETING
