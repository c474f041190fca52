from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

ENV_PREFIX = "MEMOBENCH_"

DEFAULT_HOSTNAMES = ["example.com", "localhost", "test.com", "example.org"]


class BenchConfig(BaseSettings):
    """Settings of a benchmark run, overridable with MEMOBENCH_* variables"""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    warmup_s: float = Field(2.0, ge=0, description="Warm-up time of each report in seconds")
    time_s: float = Field(5.0, gt=0, description="Measured time of each report in seconds")
    fib_version: int = Field(20, ge=0, description="Version of the protocol payload")
    payload_text: str = Field("Hello, world! ", description="Text repeated in the payload")
    payload_repeat: int = Field(100, ge=1, description="Repetitions of payload_text")
    hostnames: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_HOSTNAMES),
        description="Hostnames resolved by the DNS benchmark",
    )

    @field_validator("hostnames", mode="before")
    @classmethod
    def split_hostnames(cls, v):
        """Accept a comma separated string, as given in the environment."""
        if isinstance(v, str):
            return [name.strip() for name in v.split(",") if name.strip()]
        return v

    @property
    def payload(self) -> dict[str, int | str]:
        return {
            "version": self.fib_version,
            "interesting_data": self.payload_text * self.payload_repeat,
        }
