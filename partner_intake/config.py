"""Configuration management using Pydantic BaseSettings."""
from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable overrides."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True
    )

    # Branding used in generated documents and emails
    brand_name: str = Field(default="OneShopCentrale", alias="BRAND_NAME")

    # Email delivery (Resend)
    resend_api_key: str = Field(default="", alias="RESEND_API_KEY")
    resend_api_base: str = Field(default="https://api.resend.com", alias="RESEND_API_BASE")
    admin_email: str = Field(default="", alias="ADMIN_EMAIL")
    from_email: str = Field(default="", alias="FROM_EMAIL")

    # Data paths
    data_dir: Path = Field(default_factory=lambda: Path("./data"), alias="DATA_DIR")
    out_dir: Path = Field(default_factory=lambda: Path("./out"), alias="OUT_DIR")
    uploads_dir: Path = Field(default_factory=lambda: Path("./data/uploads"), alias="UPLOADS_DIR")
    logs_dir: Path = Field(default_factory=lambda: Path("./logs"), alias="LOGS_DIR")

    # Database
    db_path: Path = Field(default_factory=lambda: Path("./data/intake.duckdb"), alias="DB_PATH")

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        # Ensure directories exist
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.out_dir.mkdir(parents=True, exist_ok=True)
        self.uploads_dir.mkdir(parents=True, exist_ok=True)
        self.logs_dir.mkdir(parents=True, exist_ok=True)

    @property
    def duckdb_path(self) -> str:
        """Return DuckDB path as string."""
        return str(self.db_path)

    @property
    def email_configured(self) -> bool:
        """True when enough is set to deliver admin notifications."""
        return bool(self.resend_api_key and self.admin_email and self.from_email)


# Global settings instance
settings = Settings()
