from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./carcloud.sqlite3"
    access_token_secret: str = "change-me"
    token_ttl_hours: int = 24
    environment: str = "development"  # "production" enables secure cookies
    latest_cars_limit: int = 6
    seed_demo_data: bool = False
    cors_origins: list[str] = [
        "http://localhost:5173",
        "https://carcloud-7bc2a.web.app",
        "https://carcloud-7bc2a.firebaseapp.com",
    ]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


settings = Settings()
