from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.entities.compression import Compression


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    ARCHIVE_DEFAULT_COMPRESSION: Compression = Compression.DEFLATE
    ARCHIVE_QUIET: bool = False
    ARCHIVE_READ_CHUNK_SIZE: int = 65536

    ARCHIVE_ERROR_LOG: str | None = None
    ARCHIVE_RUN_LOG: str | None = None

    @field_validator("ARCHIVE_DEFAULT_COMPRESSION", mode="before")
    @classmethod
    def _parse_compression(cls, value):
        if isinstance(value, str):
            return Compression.parse(value)
        return value

    @field_validator("ARCHIVE_READ_CHUNK_SIZE")
    @classmethod
    def _positive_chunk(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("ARCHIVE_READ_CHUNK_SIZE must be positive")
        return value


settings = Settings()
