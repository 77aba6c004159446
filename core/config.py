from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

ROOT = Path(__file__).resolve().parents[1]

class Settings(BaseSettings):
    apps_dir: Path = ROOT / "apps"
    schema_path: Path = ROOT / "schema" / "app.schema.json"

    metadata_filename: str = "app.yaml"
    logo_filename: str = "logo.png"

    log_level: str = "WARNING"

    model_config = SettingsConfigDict(env_prefix="REGISTRY_", env_file=".env", env_file_encoding="utf-8", extra="ignore")

settings = Settings()
