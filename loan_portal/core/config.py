import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Settings:
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "Micro-finance Service Portal")
    MONGODB_URI: str = os.getenv("MONGODB_URI")
    MONGODB_DB_NAME: str = os.getenv("MONGODB_DB_NAME")
    MONGODB_TLS: bool = _env_flag("MONGODB_TLS", "false")
    API_PREFIX: str = os.getenv("API_PREFIX", "/api")
    PORT: int = int(os.getenv("PORT", "5000"))
    CLIENT_URL: str = os.getenv("CLIENT_URL", "http://localhost:3000")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    # Stores member passwords as bcrypt hashes instead of the submitted plaintext
    HASH_MEMBER_PASSWORDS: bool = _env_flag("HASH_MEMBER_PASSWORDS", "true")
    SEED_SERVICES: bool = _env_flag("SEED_SERVICES", "false")

settings = Settings()
