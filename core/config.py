from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    DATABASE_URL: str = "sqlite:///fluentfocus.db"
    AUTO_CREATE_TABLES: bool = True
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:5173"

    DICTIONARY_API_URL: str = "https://api.dictionaryapi.dev/api/v2/entries/en"
    IELTS_SOURCE_URL: str = (
        "https://raw.githubusercontent.com/Aynaabaj/IELTS-1200-Words-Practice/master/src/assets/data/words.json"
    )
    TOEFL_SOURCE_URL: str = "https://raw.githubusercontent.com/ladrift/toefl/master/list_01.txt"
    SEED_WORDS_PER_SOURCE: int = 50
    SEED_REQUEST_DELAY: float = 0.3

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()
