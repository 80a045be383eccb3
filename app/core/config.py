from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import AliasChoices, Field

class Settings(BaseSettings):
    PROJECT_NAME: str = "Storefront API"
    DATABASE_URL: str = "sqlite:///./storefront.db"
    LOG_LEVEL: str = "INFO"

    CORS_ALLOW_ORIGINS: List[str] = ["*"]

    # AI recommendations (OpenAI-compatible chat completions gateway)
    AI_RECOMMENDATIONS_ENABLED: bool = True
    AI_GATEWAY_URL: str = "https://ai.gateway.lovable.dev/v1/chat/completions"
    AI_GATEWAY_API_KEY: Optional[str] = Field(
        None, validation_alias=AliasChoices("AI_GATEWAY_API_KEY", "LOVABLE_API_KEY")
    )
    AI_MODEL: str = "google/gemini-2.5-flash"
    AI_TIMEOUT_SECONDS: float = 10.0

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
