from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from b64url.core.codec import BoundaryPolicy


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="B64URL_", env_file=".env", extra="ignore")

    app_name: str = "b64url"

    # Decoding defaults (used by decode() and the CLI)
    boundary_policy: BoundaryPolicy = BoundaryPolicy.ZERO_FILL
    strict: bool = False

    # Logging
    log_level: str = "WARNING"
    log_json: bool = False


settings = Settings()
