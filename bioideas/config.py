"""Runtime settings, read from the environment (and `.env`)."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

REQUEST_TIMEOUT_SECONDS = 5.0
DEFAULT_USER_AGENT = "BioAIIdeas/1.0"
SOURCES_FILE = Path(__file__).parent / "S1_aggregate" / "sources.yaml"


@dataclass(frozen=True)
class Settings:
    request_timeout: float = REQUEST_TIMEOUT_SECONDS
    user_agent: str = DEFAULT_USER_AGENT
    sources_file: Path = SOURCES_FILE
    enabled_sources: tuple[str, ...] = ()   # empty = all
    log_dir: Path = Path("logs")
    ncbi_email: str | None = None
    ncbi_api_key: str | None = None
    openalex_mailto: str | None = None

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from BIOIDEAS_* / NCBI_* / OPENALEX_* variables."""
        enabled = _get_env("BIOIDEAS_ENABLED_SOURCES") or ""
        sources_file = _get_env("BIOIDEAS_SOURCES_FILE")
        return cls(
            request_timeout=_get_float("BIOIDEAS_REQUEST_TIMEOUT", REQUEST_TIMEOUT_SECONDS),
            user_agent=_get_env("BIOIDEAS_USER_AGENT") or DEFAULT_USER_AGENT,
            sources_file=Path(sources_file) if sources_file else SOURCES_FILE,
            enabled_sources=tuple(s.strip() for s in enabled.split(",") if s.strip()),
            log_dir=Path(_get_env("BIOIDEAS_LOG_DIR") or "logs"),
            ncbi_email=_get_env("NCBI_EMAIL"),
            ncbi_api_key=_get_env("NCBI_API_KEY"),
            openalex_mailto=_get_env("OPENALEX_MAILTO"),
        )

    @property
    def headers(self) -> dict[str, str]:
        return {"User-Agent": self.user_agent}


def _get_env(key: str) -> str | None:
    value = os.getenv(key, "").strip()
    return value or None


def _get_float(key: str, default: float) -> float:
    value = _get_env(key)
    try:
        parsed = float(value) if value else default
    except ValueError:
        return default
    return parsed if parsed > 0 else default
