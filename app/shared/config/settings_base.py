# -*- coding: utf-8 -*-
"""
app/shared/config/settings_base.py

Base de configuración (Pydantic v2) para el backend del Gestor de Fichas.
- Esta clase NO instancia singletons ni resuelve .env; eso lo hace config_loader.
- Es la base para settings_dev.py, settings_testing.py y settings_prod.py.

Autor: Gestor de Fichas
Fecha: 14/09/2026
"""

import json
from datetime import date
from typing import Any, Literal, Optional

from pydantic import Field, SecretStr, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


# Tipos de entorno soportados
EnvName = Literal["development", "test", "production"]

# Prioridad de negocio de portales en los informes (resto: al final, por nombre)
DEFAULT_PORTAL_PRIORITY = ["familia", "salud", "mayores", "discapacidad", "mujer"]


class BaseAppSettings(BaseSettings):
    # =========================
    # Núcleo de la aplicación
    # =========================
    python_env: EnvName = Field(default="development", validation_alias="PYTHON_ENV")
    app_name: str = Field(default="Gestor de Fichas", validation_alias="APP_NAME")
    app_version: str = Field(default="0.1.0", validation_alias="APP_VERSION")
    app_host: str = Field(default="0.0.0.0", validation_alias="APP_HOST")
    app_port: int = Field(default=8000, validation_alias="APP_PORT")
    debug: bool = Field(default=False, validation_alias="DEBUG")

    # =========================
    # Base de datos (solo lectura para estadísticas)
    # =========================
    db_user: str = Field(default="fichas", validation_alias="DB_USER")
    db_password: SecretStr = Field(default=SecretStr("fichas"), validation_alias="DB_PASSWORD")
    db_host: str = Field(default="localhost", validation_alias="DB_HOST")
    db_port: int = Field(default=5432, validation_alias="DB_PORT")
    db_name: str = Field(default="gestor_fichas", validation_alias="DB_NAME")
    db_pool_size: int = Field(default=5, validation_alias="DB_POOL_SIZE")
    db_max_overflow: int = Field(default=5, validation_alias="DB_MAX_OVERFLOW")
    db_pool_timeout: int = Field(default=5, validation_alias="DB_POOL_TIMEOUT")
    db_pool_recycle: int = Field(default=1800, validation_alias="DB_POOL_RECYCLE")
    db_pool_pre_ping: bool = Field(default=True, validation_alias="DB_POOL_PRE_PING")
    db_echo_sql: bool = Field(default=False, validation_alias="DB_ECHO_SQL")
    db_statement_timeout_ms: int = Field(default=15000, validation_alias="DB_STATEMENT_TIMEOUT_MS")
    db_sslmode: str = Field(default="prefer", validation_alias="DB_SSLMODE")  # prefer|require|disable
    db_url: Optional[str] = Field(default=None, validation_alias="DB_URL")

    @computed_field  # type: ignore[misc]
    @property
    def database_url(self) -> str:
        """
        Genera la URL de conexión completa para SQLAlchemy (driver síncrono psycopg).
        Prioriza DB_URL si existe, sino construye desde componentes individuales.
        """
        from urllib.parse import quote_plus

        if self.db_url:
            url = self.db_url
            if url.startswith("postgres://"):
                url = url.replace("postgres://", "postgresql+psycopg://", 1)
            elif url.startswith("postgresql://"):
                url = url.replace("postgresql://", "postgresql+psycopg://", 1)
            return url

        pw = quote_plus(self.db_password.get_secret_value())
        return (
            f"postgresql+psycopg://{self.db_user}:{pw}"
            f"@{self.db_host}:{self.db_port}/{self.db_name}?sslmode={self.db_sslmode}"
        )

    # =========================
    # CORS / Frontend
    # =========================
    allowed_origins: str = Field(default="*", validation_alias="CORS_ORIGINS")

    # =========================
    # Proxy de autenticación (sesión opaca resuelta aguas arriba)
    # =========================
    auth_caller_header: str = Field(default="X-Auth-User", validation_alias="AUTH_CALLER_HEADER")
    auth_role_header: str = Field(default="X-Auth-Role", validation_alias="AUTH_ROLE_HEADER")

    # =========================
    # Estadísticas
    # =========================
    stats_max_months: int = Field(default=600, validation_alias="STATS_MAX_MONTHS")
    stats_portal_priority: Any = Field(
        default_factory=lambda: list(DEFAULT_PORTAL_PRIORITY),
        validation_alias="STATS_PORTAL_PRIORITY",
    )
    stats_fallback_from: date = Field(default=date(2020, 1, 1), validation_alias="STATS_FALLBACK_FROM")
    stats_fallback_to: date = Field(default=date(2030, 1, 1), validation_alias="STATS_FALLBACK_TO")

    # =========================
    # Observabilidad / Logging
    # =========================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_format: Literal["json", "pretty", "plain"] = Field(default="pretty", validation_alias="LOG_FORMAT")
    metrics_enabled: bool = Field(default=True, validation_alias="METRICS_ENABLED")

    # ===== Helpers de entorno =====
    @computed_field  # type: ignore[misc]
    @property
    def is_dev(self) -> bool:
        return self.python_env == "development"

    @computed_field  # type: ignore[misc]
    @property
    def is_test(self) -> bool:
        return self.python_env == "test"

    @computed_field  # type: ignore[misc]
    @property
    def is_prod(self) -> bool:
        return self.python_env == "production"

    # ===== Normalizador de la prioridad de portales =====
    @field_validator("stats_portal_priority", mode="before")
    @classmethod
    def _normalize_portal_priority(cls, v):
        if isinstance(v, (list, tuple)):
            return [str(x).strip() for x in v if str(x).strip()]
        if v is None or (isinstance(v, str) and v.strip() in ("", "[]")):
            return list(DEFAULT_PORTAL_PRIORITY)
        if isinstance(v, str):
            s = v.strip()
            if s.startswith("[") and s.endswith("]"):
                try:
                    return [str(x).strip() for x in json.loads(s) if str(x).strip()]
                except ValueError:
                    return list(DEFAULT_PORTAL_PRIORITY)
            return [x.strip() for x in s.split(",") if x.strip()]
        return v

    @field_validator("stats_max_months")
    @classmethod
    def _check_max_months(cls, v: int) -> int:
        if v < 1:
            raise ValueError("STATS_MAX_MONTHS debe ser >= 1")
        return v

    # ===== Utilidad para normalizar CORS =====
    def get_cors_origins(self) -> list[str]:
        """Convierte allowed_origins en lista procesable para CORS middleware."""
        if not self.allowed_origins or self.allowed_origins == "*":
            return ["*"]
        return [o.strip().strip('"').strip("'") for o in self.allowed_origins.split(",") if o.strip()]

    def _security_checks(self) -> None:
        """
        Validaciones mínimas de seguridad y coherencia.
        Se invoca desde config_loader tras instanciar el settings.
        """
        import logging
        logger = logging.getLogger(__name__)

        if self.stats_fallback_from >= self.stats_fallback_to:
            raise ValueError("STATS_FALLBACK_FROM debe ser anterior a STATS_FALLBACK_TO")

        if self.is_prod:
            if self.debug:
                raise ValueError("DEBUG debe estar desactivado en producción")
            if not self.db_url and self.db_password.get_secret_value() == "fichas":
                raise ValueError("DB_PASSWORD no puede usar el valor por defecto en producción")

        if self.is_dev and not self.db_url:
            logger.info("ℹ️ DB_URL no definida - se construye la URL desde DB_HOST/DB_NAME")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


__all__ = ["BaseAppSettings", "EnvName", "DEFAULT_PORTAL_PRIORITY"]
# Fin del archivo app/shared/config/settings_base.py
