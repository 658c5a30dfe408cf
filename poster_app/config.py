from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # only used to seed the credential field, users can override it in the form
    openai_api_key: str | None = None
    model_name: str = "dall-e-3"

    download_dir: str = "downloads"
    share_webhook_url: str | None = None

    log_level: str = "INFO"


settings = Settings()
