"""
Configuration management for the usergraph service
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    api_host: str = "127.0.0.1"
    api_port: int = 3000
    graphql_path: str = "/graphql"

    # Seed record inserted into every freshly created context
    seed_user_id: str = "1"
    seed_user_name: str = "name"
    seed_user_email: str = "name@example.com"

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="USERGRAPH_",
        case_sensitive=False,
    )


# Global settings instance
settings = Settings()
