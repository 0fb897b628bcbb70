import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "False") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


@dataclass
class Settings:
    # Application settings
    app_name: str = os.getenv("APP_NAME", "Bookshelf Matchers")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "WARNING").upper()

    # Book construction: permissive unless explicitly hardened
    strict_books: bool = _env_flag("LIBRARY_STRICT_BOOKS")

    # CLI output: plain | json | rich
    default_output: str = os.getenv("LIB_CLI_OUTPUT", "plain")


settings = Settings()
