# =============================================================================
# core/config.py  —  Runtime Settings
# =============================================================================
#
# All configuration comes from environment variables.  Entry points call
# dotenv.load_dotenv() first, so a local .env file works the same way.
#
#   OPENROUTER_API_KEY       credential for get_latest_updates (optional)
#   CSS_TUTOR_MEMORY_PATH    backing JSON file (default: data/memory.json)
#   CSS_TUTOR_UPDATES_MODEL  model id sent to OpenRouter
#   CSS_TUTOR_HTTP_TIMEOUT   seconds to wait on the upstream call
#   OPENROUTER_SITE_URL      optional HTTP-Referer attribution header
#   OPENROUTER_APP_TITLE     optional X-Title attribution header
#   CSS_TUTOR_LOG_LEVEL      logging level name (default: INFO)
#
# A missing API key is NOT an error: it simply means the update tool is not
# registered.
# =============================================================================

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DEFAULT_MEMORY_PATH = PROJECT_ROOT / "data" / "memory.json"
DEFAULT_UPDATES_MODEL = "perplexity/sonar-pro"
DEFAULT_HTTP_TIMEOUT = 60.0


@dataclass(frozen=True)
class Settings:
    """Everything the server needs to know at startup."""

    memory_path: Path = DEFAULT_MEMORY_PATH
    openrouter_api_key: Optional[str] = None
    updates_model: str = DEFAULT_UPDATES_MODEL
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    site_url: Optional[str] = None
    app_title: Optional[str] = None
    log_level: str = "INFO"

    @property
    def updates_enabled(self) -> bool:
        return bool(self.openrouter_api_key)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from the process environment (or a given mapping)."""
        env = os.environ if environ is None else environ

        timeout_raw = env.get("CSS_TUTOR_HTTP_TIMEOUT")
        try:
            timeout = float(timeout_raw) if timeout_raw else DEFAULT_HTTP_TIMEOUT
        except ValueError:
            raise ValueError(
                f"CSS_TUTOR_HTTP_TIMEOUT must be a number, got {timeout_raw!r}"
            ) from None

        return cls(
            memory_path=Path(env.get("CSS_TUTOR_MEMORY_PATH") or DEFAULT_MEMORY_PATH),
            # Blank values in .env files count as "not set".
            openrouter_api_key=env.get("OPENROUTER_API_KEY", "").strip() or None,
            updates_model=env.get("CSS_TUTOR_UPDATES_MODEL") or DEFAULT_UPDATES_MODEL,
            http_timeout=timeout,
            site_url=env.get("OPENROUTER_SITE_URL") or None,
            app_title=env.get("OPENROUTER_APP_TITLE") or None,
            log_level=(env.get("CSS_TUTOR_LOG_LEVEL") or "INFO").upper(),
        )
