from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MAX_RETRIES = 5


class RetryConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_retries: int = Field(default=DEFAULT_MAX_RETRIES, ge=1)
    # Milliseconds awaited before every attempt after the first
    connection_interval: int | None = Field(default=None, ge=0)
    # Seconds allowed for a single attempt
    timeout: float | None = Field(default=None, gt=0)


# Only "target" is required; every other key falls back to the command line or defaults
class CommandFile(BaseModel):
    model_config = ConfigDict(extra="forbid")

    target: int | str
    max_retries: int | None = Field(default=None, ge=1)
    connection_interval: int | None = Field(default=None, ge=0)
    timeout: float | None = Field(default=None, gt=0)
