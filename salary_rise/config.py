# salary_rise/config.py
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # --- Application ---
    APP_NAME: str = "Salary Rise Calculator"

    # --- CPI data source ---
    # Local path or http(s) URL of the CSV published by the statistics office
    CPI_DATA_SOURCE: str = "data/cpi_data.csv"
    HTTP_TIMEOUT: int = 30
    DATE_COLUMN: str = "Date"
    INDEX_COLUMN: str = "CPI"
    CSV_DELIMITER: str = ""  # empty string detects , ; tab or | from the header

    # --- Indexation rules ---
    REJECT_DUPLICATE_OBSERVATIONS: bool = True

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "logs/salary_rise_{time}.log"  # empty string disables the file handler

    # Number of raw datasets kept in the analysis cache
    CACHE_SIZE: int = 8

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache()
def get_settings():
    return Settings()


# Global instance
settings = get_settings()
