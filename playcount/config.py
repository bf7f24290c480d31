from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the play count analyzer."""

    default_target_date: str = "10/08/2016"  # 10 August 2016, dd/MM/yyyy
    input_encoding: str = "utf-8"
    output_encoding: str = "utf-8"
    results_suffix: str = "_results_"
    log_level: str = "INFO"
    log_format: str = "%(message)s"

    model_config = SettingsConfigDict(
        env_prefix="PLAYCOUNT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
