from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    APP_NAME: str = "Todo API"
    API_PREFIX: str = "/api"
    LOG_LEVEL: str = "INFO"

    # Client / UI
    API_URL: str = "http://localhost:8000/api"
    CLIENT_TIMEOUT: float = 10.0

    class Config:
        env_file = ".env"

settings = Settings()
