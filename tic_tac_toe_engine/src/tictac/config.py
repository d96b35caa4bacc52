import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Process-wide settings, read from the environment (.env supported)."""
    log_level: str = "INFO"
    log_file: Optional[str] = None
    rng_seed: Optional[int] = None
    cors_origins: Tuple[str, ...] = ("*",)
    host: str = "0.0.0.0"
    port: int = 8000


def _int_env(env: Mapping[str, str], name: str) -> Optional[int]:
    raw = (env.get(name) or "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from None


# PUBLIC_INTERFACE
def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from `env` (defaults to os.environ)."""
    env = os.environ if env is None else env
    origins = tuple(o.strip() for o in (env.get("CORS_ORIGINS") or "*").split(",") if o.strip())
    port = _int_env(env, "PORT")
    return Settings(
        log_level=(env.get("LOG_LEVEL") or "INFO").strip().upper(),
        log_file=(env.get("LOG_FILE") or "").strip() or None,
        rng_seed=_int_env(env, "TICTAC_RNG_SEED"),
        cors_origins=origins or ("*",),
        host=(env.get("HOST") or "0.0.0.0").strip(),
        port=port if port is not None else 8000,
    )
