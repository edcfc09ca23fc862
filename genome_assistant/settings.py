import logging
from pathlib import Path
from pydantic_settings import BaseSettings

from .constants.constants import *

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    # API Keys and Credentials
    gemini_api_key: str = ""
    credential_file: Path = Path.home() / ".genome_assistant" / "credentials.json"

    # Model Configuration
    model_name: str = "gemini-1.5-flash"
    gemini_base_url: str = GEMINI_BASE_URL
    temperature: float = 0.7
    max_output_tokens: int = 4096

    # Sequence Limits
    min_sequence_length: int = DEFAULT_MIN_SEQUENCE_LENGTH
    max_sequence_length: int = DEFAULT_MAX_SEQUENCE_LENGTH

    # Performance and Timeout Settings
    request_timeout: int = 30

    # Chat Settings
    chat_history_limit: int = PROMPT_RECENT_HISTORY_LIMIT
    chat_max_output_tokens: int = 512

    log_level: str = "INFO"

    def __init__(self, **kwargs):
        super().__init__(**kwargs)

        if self.min_sequence_length > self.max_sequence_length:
            raise ValueError(
                "MIN_SEQUENCE_LENGTH must not exceed MAX_SEQUENCE_LENGTH. Please check your .env file."
            )

        if not self.gemini_api_key:
            logger.info("GEMINI_API_KEY not set; a key can be saved from the settings panel.")

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
        "extra": "allow",
    }


settings = Settings()
