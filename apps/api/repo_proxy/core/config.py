from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    APP_NAME: str = "repo-info-proxy"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    GITHUB_TOKEN: str | None = None
    GITHUB_API_BASE: str = "https://api.github.com"
    GITHUB_USER_AGENT: str = "YackSuite-Tool-Status-Checker"
    GITHUB_TIMEOUT_SECONDS: float = 30.0

    CACHE_MAX_AGE_SECONDS: int = 60 * 60
    REPO_FETCH_CONCURRENCY: int = 10  # 0 = unbounded
    FORWARD_TOKEN_ON_SINGLE_LOOKUP: bool = True

    STATIC_DIR: str | None = None

    @property
    def cache_control(self) -> str:
        return f"public, max-age={self.CACHE_MAX_AGE_SECONDS}"

settings = Settings()
