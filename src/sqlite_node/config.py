from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATABASES_ROOT: str = "./databases"
    DEFAULT_WORKFLOW_ID: str = "default_workflow"
    REDIS_URL: str = "redis://localhost:6379/0"
    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"  # relative to the process working directory
        env_file_encoding = "utf-8"

settings = Settings()
REDIS_URL = settings.REDIS_URL
BROKER_URL = REDIS_URL
RESULT_BACKEND = REDIS_URL
