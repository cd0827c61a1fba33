from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Backend for the demo's configured repository: "map" or "list"
    USER_REPOSITORY_BACKEND: str = "map"

    DEMO_USER_NAME: str = "jack"

    LOG_LEVEL: str = "INFO"


settings = Settings()
