
from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = Field(default="Vendor Intake API", alias="APP_NAME")
    app_env: str = Field(default="development", alias="APP_ENV")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=8080, alias="PORT")
    frontend_url: str = Field(default="http://localhost:3000", alias="FRONTEND_URL")

    # MongoDB
    mongo_uri: str | None = Field(default=None, alias="MONGO_URI")
    db_name: str = Field(default="techathon_db", alias="DB_NAME")
    collection_name: str = Field(default="global_vectors", alias="COLLECTION_NAME")
    mongo_connect_timeout_seconds: float = Field(
        default=10.0, alias="MONGO_CONNECT_TIMEOUT_SECONDS",
    )  # connect + ping at startup
    insert_timeout_seconds: float = Field(
        default=5.0, alias="INSERT_TIMEOUT_SECONDS",
    )  # per request

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
        "extra": "ignore",
    }

    @property
    def is_development(self) -> bool:
        return self.app_env == "development"

settings = Settings()
