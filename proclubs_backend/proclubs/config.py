# proclubs/config.py
"""
Configuration du service, lue une seule fois depuis l'environnement.

Les valeurs par défaut ne conviennent qu'au développement local :
SECRET_KEY, JWT_SECRET et DISCORD_TOKEN doivent être fournis en production.
"""
import os
from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

INSECURE_JWT_SECRET = "changeme"
INSECURE_SECRET_KEY = "change-me-in-production"


def _to_bool(raw: Optional[str], default: bool = False) -> bool:
    if raw is None or raw == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _to_int(raw: Optional[str], default: int) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError):
        return default


def _to_float(raw: Optional[str], default: float) -> float:
    try:
        return float(raw)
    except (TypeError, ValueError):
        return default


def _split(raw: Optional[str]) -> Tuple[str, ...]:
    return tuple(s.strip() for s in (raw or "").split(",") if s.strip())


@dataclass(frozen=True)
class ServiceConfig:
    """Réglages immuables partagés par l'API et le bot."""

    # Django
    secret_key: str = INSECURE_SECRET_KEY
    debug: bool = True
    allowed_origins: Tuple[str, ...] = ("http://localhost:5173", "http://127.0.0.1:5173")
    log_level: str = "INFO"

    # Base de données
    db_engine: str = "django.db.backends.mysql"
    db_name: str = "proclubs"
    db_user: str = "Admin"
    db_password: str = "Admin"
    db_host: str = "127.0.0.1"
    db_port: str = "3306"

    # Jetons
    jwt_secret: str = INSECURE_JWT_SECRET
    jwt_lifetime_hours: int = 24

    # Ports d'écoute
    port: int = 4000
    bot_port: int = 5000

    # Discord
    discord_token: str = ""
    discord_client_id: str = ""
    discord_report_channel_id: int = 0
    command_prefix: str = "!"
    report_poll_seconds: float = 10.0

    # Fournisseur EA
    ea_api_url: str = "https://proclubs.ea.com/api"
    ea_timeout: float = 10.0
    ea_headers: Mapping[str, str] = field(default_factory=lambda: {
        "User-Agent": "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko)",
        "Accept": "application/json",
        "Referer": "https://www.ea.com/",
    })

    @property
    def uses_insecure_jwt_secret(self) -> bool:
        return self.jwt_secret == INSECURE_JWT_SECRET

    @property
    def uses_insecure_secret_key(self) -> bool:
        return self.secret_key == INSECURE_SECRET_KEY

    @property
    def database(self) -> dict:
        """Entrée DATABASES['default'] pour Django."""
        if self.db_engine.endswith("sqlite3"):
            return {"ENGINE": self.db_engine, "NAME": self.db_name}
        db = {
            "ENGINE": self.db_engine,
            "NAME": self.db_name,
            "USER": self.db_user,
            "PASSWORD": self.db_password,
            "HOST": self.db_host,
            "PORT": self.db_port,
        }
        if self.db_engine.endswith("mysql"):
            db["OPTIONS"] = {"charset": "utf8mb4"}
        return db


def load_config(environ: Optional[Mapping[str, str]] = None) -> ServiceConfig:
    """Construit un ServiceConfig depuis `environ` (os.environ par défaut)."""
    env = os.environ if environ is None else environ
    defaults = ServiceConfig()
    debug = _to_bool(env.get("DEBUG"), defaults.debug)

    return ServiceConfig(
        secret_key=env.get("SECRET_KEY") or defaults.secret_key,
        debug=debug,
        allowed_origins=_split(env.get("ALLOWED_ORIGINS")) or defaults.allowed_origins,
        log_level=(env.get("LOG_LEVEL") or ("DEBUG" if debug else defaults.log_level)).upper(),
        db_engine=env.get("DB_ENGINE") or defaults.db_engine,
        db_name=env.get("DB_NAME") or defaults.db_name,
        db_user=env.get("DB_USER") or defaults.db_user,
        db_password=env.get("DB_PASSWORD") or defaults.db_password,
        db_host=env.get("DB_HOST") or defaults.db_host,
        db_port=env.get("DB_PORT") or defaults.db_port,
        jwt_secret=env.get("JWT_SECRET") or defaults.jwt_secret,
        jwt_lifetime_hours=_to_int(env.get("JWT_LIFETIME_HOURS"), defaults.jwt_lifetime_hours),
        port=_to_int(env.get("PORT"), defaults.port),
        bot_port=_to_int(env.get("BOT_PORT"), defaults.bot_port),
        discord_token=env.get("DISCORD_TOKEN") or defaults.discord_token,
        discord_client_id=env.get("CLIENT_ID") or defaults.discord_client_id,
        discord_report_channel_id=_to_int(env.get("DISCORD_REPORT_CHANNEL_ID"), 0),
        command_prefix=env.get("COMMAND_PREFIX") or defaults.command_prefix,
        report_poll_seconds=_to_float(env.get("REPORT_POLL_SECONDS"), defaults.report_poll_seconds),
        ea_api_url=(env.get("EA_API_URL") or defaults.ea_api_url).rstrip("/"),
        ea_timeout=_to_float(env.get("EA_TIMEOUT"), defaults.ea_timeout),
    )
