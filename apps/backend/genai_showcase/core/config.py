import os
from pydantic import BaseModel
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Settings(BaseModel):
    env: str = os.getenv("ENV", "development")
    port: int = int(os.getenv("PORT", "3000"))
    https_port: int = int(os.getenv("HTTPS_PORT", "443"))
    allowed_origins: list[str] = os.getenv("ALLOWED_ORIGINS", "*").split(",")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    enable_performance_tracking: bool = _env_flag("ENABLE_PERFORMANCE_TRACKING")

    # Provider credentials; a missing key disables that provider at dispatch time
    gemini_api_key: str | None = os.getenv("GEMINI_API_KEY") or None
    openai_api_key: str | None = os.getenv("OPENAI_API_KEY") or None
    deepseek_api_key: str | None = os.getenv("DEEPSEEK_API_KEY") or None

    gemini_model: str = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")
    openai_model: str = os.getenv("OPENAI_MODEL", "gpt-4o")
    deepseek_model: str = os.getenv("DEEPSEEK_MODEL", "deepseek-chat")
    deepseek_base_url: str = os.getenv("DEEPSEEK_BASE_URL", "https://api.deepseek.com")

    # TLS material for the optional HTTPS listener
    https_key_path: str = os.getenv("HTTPS_KEY_PATH", "server.key")
    https_cert_path: str = os.getenv("HTTPS_CERT_PATH", "server.crt")

settings = Settings()
