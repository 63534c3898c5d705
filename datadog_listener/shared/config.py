from dataclasses import dataclass
import os

@dataclass(frozen=True)
class Settings:
    # Datadog (key injected via Secret Manager -> env)
    datadog_api_key: str = os.getenv("DATADOG_API_KEY", "")
    datadog_url: str = os.getenv("DATADOG_URL", "https://api.datadoghq.com")
    datadog_timeout_s: float = float(os.getenv("DATADOG_TIMEOUT_S", "30"))

settings = Settings()
