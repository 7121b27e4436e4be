from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Connection details for the chat-completion API, read once at startup."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    AI_CHAT_BASE_URL: str = Field(..., min_length=1)
    AI_CHAT_KEY: str = Field(..., min_length=1)
    AI_CHAT_MODEL: str = Field(..., min_length=1)
    AI_CHAT_NAME: str = Field(..., min_length=1)

    @property
    def tool_name(self) -> str:
        # only the first space is replaced
        return "ask-" + self.AI_CHAT_NAME.lower().replace(" ", "-", 1)
