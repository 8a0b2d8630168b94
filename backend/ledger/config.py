import os
from pathlib import Path
from pydantic import BaseModel, Field

# Data directory: use LEDGER_DATA_DIR env var if set (e.g. /data in Docker),
# otherwise fall back to ~/.config/ledger for local dev
DEFAULT_DATA_DIR = Path.home() / ".config" / "ledger"
DEFAULT_CORS_ORIGINS = ["http://localhost:5173", "http://127.0.0.1:5173"]  # Vite dev server


class Settings(BaseModel):
    """Runtime settings for the ledger server."""
    data_dir: Path = DEFAULT_DATA_DIR
    database_url: str | None = None
    log_level: str = "INFO"
    cors_origins: list[str] = Field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))

    @property
    def resolved_database_url(self) -> str:
        """The database URL, defaulting to a SQLite file inside data_dir."""
        if self.database_url:
            return self.database_url
        return f"sqlite:///{self.data_dir / 'ledger.db'}"


def load_settings() -> Settings:
    """Build settings from LEDGER_* environment variables."""
    values: dict = {}

    data_dir = os.environ.get("LEDGER_DATA_DIR")
    if data_dir:
        values["data_dir"] = Path(data_dir)

    database_url = os.environ.get("LEDGER_DATABASE_URL")
    if database_url:
        values["database_url"] = database_url

    log_level = os.environ.get("LEDGER_LOG_LEVEL")
    if log_level:
        values["log_level"] = log_level.upper()

    origins = os.environ.get("LEDGER_CORS_ORIGINS")
    if origins:
        values["cors_origins"] = [o.strip() for o in origins.split(",") if o.strip()]

    return Settings(**values)


def ensure_data_dir(settings: Settings) -> None:
    """Ensure the data directory exists when using the default SQLite file."""
    if settings.database_url is None:
        settings.data_dir.mkdir(parents=True, exist_ok=True)
