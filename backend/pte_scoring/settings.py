from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
	anthropic_api_key: str | None = Field(default=None, validation_alias="ANTHROPIC_API_KEY")
	# Model used for remote grading; local scoring is used when no key is configured
	anthropic_model: str = Field(default="claude-3-haiku-20240307", validation_alias="ANTHROPIC_MODEL")
	anthropic_base_url: str = Field(default="https://api.anthropic.com/v1/messages", validation_alias="ANTHROPIC_BASE_URL")
	anthropic_version: str = Field(default="2023-06-01", validation_alias="ANTHROPIC_VERSION")
	ai_max_tokens: int = Field(default=1500, validation_alias="AI_MAX_TOKENS")
	ai_temperature: float = Field(default=0.1, validation_alias="AI_TEMPERATURE")
	ai_timeout_seconds: float = Field(default=30.0, validation_alias="AI_TIMEOUT_SECONDS")

	# Local scoring scale. Content is either 0-3 (one point per key element) or 0-2.
	scoring_content_scale: int = Field(default=3, validation_alias="SCORING_CONTENT_SCALE")
	scoring_min_words: int = Field(default=5, validation_alias="SCORING_MIN_WORDS")
	scoring_max_words: int = Field(default=75, validation_alias="SCORING_MAX_WORDS")

	# HTTP layer
	cors_origins: str = Field(default="*", validation_alias="CORS_ORIGINS")
	log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
	app_version: str = Field(default="2.1.0", validation_alias="APP_VERSION")

	# pydantic-settings v2 style config
	model_config = SettingsConfigDict(env_file=".env", extra="ignore")

	@property
	def cors_origin_list(self) -> list[str]:
		return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

settings = Settings()
