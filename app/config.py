from typing import List, Optional

from pydantic_settings import BaseSettings
from dotenv import load_dotenv
load_dotenv()

class Settings(BaseSettings):
    gemini_api_key: Optional[str] = None
    text_model: str = "gemini-2.0-flash"
    # Speech narration for auditory learners
    tts_model: str = "gemini-2.5-flash-preview-tts"
    tts_voice: str = "Algenib"
    audio_channels: int = 1
    audio_sample_rate: int = 24000
    audio_sample_width: int = 2
    # In-memory career sessions
    max_sessions: int = 1000
    session_ttl_seconds: int = 3600

    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()
