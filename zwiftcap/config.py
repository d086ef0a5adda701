from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import SettingsConfigDict, BaseSettings


class CaptureSettings(BaseSettings):
    server_port: int = Field(3022, validation_alias="ZWIFT_SERVER_PORT")
    interface: Optional[str] = Field(None, validation_alias="ZWIFT_INTERFACE")

    # Bytes after the message in client datagrams
    trailer_length: int = Field(4, validation_alias="ZWIFT_TRAILER_LENGTH")

    log_ring_size: int = Field(200, validation_alias="ZWIFT_LOG_RING_SIZE")
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", populate_by_name=True, extra="ignore")

    @property
    def bpf_filter(self) -> str:
        return f"udp port {self.server_port}"


@lru_cache
def get_settings() -> CaptureSettings:
    return CaptureSettings()
