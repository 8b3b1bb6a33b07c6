"""Runtime configuration for schematic format detection."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="SCHEMATIC_FORMATS_", env_file=".env", extra="ignore")

    app_name: str = "schematic-formats"
    log_level: str = "INFO"
    nbt_gzipped: bool | None = Field(
        default=None,
        description="Force gzip on/off when reading NBT files. Unset means auto-detect.",
    )
    nbt_byteorder: str = Field(
        default="big",
        description="Byte order of NBT payloads ('big' for Java edition, 'little' for Bedrock).",
    )


settings = Settings()
