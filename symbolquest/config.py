from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "SymbolQuest"
    debug: bool = False

    database_url: str = "postgresql+asyncpg://localhost:5432/symbolquest"

    # JSON list in the environment, e.g. CORS_ORIGINS='["https://example.com"]'
    cors_origins: list[str] = ["http://localhost:5173"]

    anthropic_api_key: str = ""
    anthropic_model: str = "claude-sonnet-4-20250514"
    interpretation_max_tokens: int = 600

    # Kill switch for enhanced interpretations
    llm_enabled: bool = True


settings = Settings()


# =============================================================================
# DAILY DRAW POLICY
# =============================================================================

# Draws allowed per day on the free tier (premium is unlimited)
FREE_DAILY_DRAW_LIMIT = 1

# Most recent draws excluded from reselection
LOOKBACK_WINDOW = 5

# Default page size for draw history
HISTORY_DEFAULT_LIMIT = 20

# Uniform jitter applied to each candidate's score
JITTER_MIN = 0.8
JITTER_MAX = 1.2
