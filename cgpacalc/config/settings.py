from dataclasses import dataclass
import os
from dotenv import load_dotenv


load_dotenv()


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name, "").strip()
    return int(value) if value else default


@dataclass(frozen=True)
class Settings:
    app_title: str = os.getenv("CGPACALC_TITLE", "AIUB CGPA Calculator")
    web_mode: bool = _env_flag("CGPACALC_WEB")
    port: int = _env_int("PORT", 8550)
    decimal_places: int = _env_int("CGPACALC_DECIMALS", 2)
    log_level: str = os.getenv("CGPACALC_LOG_LEVEL", "INFO").upper()


settings = Settings()
