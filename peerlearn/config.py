from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    DATABASE_URL: str = "sqlite:///peerlearn.db"
    SQL_ECHO: bool = False
    LOG_LEVEL: str = "INFO"
    LEADERBOARD_LIMIT: int = 50

    HOST: str = "127.0.0.1"
    PORT: int = 8000
    RELOAD: bool = False

settings = Settings()
