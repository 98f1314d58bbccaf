"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import List, Optional, Union
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
    )

    # Application
    debug: bool = True
    log_level: str = "INFO"
    api_prefix: str = "/api/v1"
    service_name: str = "inspection-checklist"

    # Inspection rules
    odometer_max_digits: Optional[int] = Field(default=None, ge=1, description="Longest odometer reading accepted on finalize; unset means no cap")
    average_annual_miles: int = Field(default=12000, gt=0, description="Baseline for odometer rollback heuristics")
    vin_checksum_required: bool = True

    # CORS
    allowed_origins: Union[str, List[str]] = "http://localhost:3000,http://localhost:5173"
    allowed_methods: Union[str, List[str]] = "GET,POST,PUT,PATCH,DELETE,OPTIONS"
    allowed_headers: Union[str, List[str]] = "*"

    @model_validator(mode='after')
    def convert_cors_lists(self):
        """Convert comma-separated strings to lists."""
        if isinstance(self.allowed_origins, str):
            self.allowed_origins = [item.strip() for item in self.allowed_origins.split(",") if item.strip()]
        if isinstance(self.allowed_methods, str):
            self.allowed_methods = [item.strip() for item in self.allowed_methods.split(",") if item.strip()]
        if isinstance(self.allowed_headers, str):
            self.allowed_headers = [item.strip() for item in self.allowed_headers.split(",") if item.strip()]
        return self


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
