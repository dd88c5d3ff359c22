# institute_admin/config.py
"""
Centralized Configuration Management

Version: 1.0.0
Features:
- Support both local (.env) and Streamlit Cloud (secrets.toml)
- Singleton pattern for efficiency
- Type-safe getters with defaults
- Environment detection
"""

import os
import logging
from pathlib import Path
from dotenv import load_dotenv
from typing import Dict, Any, Mapping
from dataclasses import dataclass

# Initialize logger
logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent
DEFAULT_DATA_FILE = "data/sample_institute.json"


def is_running_on_streamlit_cloud() -> bool:
    """Detect if running on Streamlit Cloud"""
    try:
        import streamlit as st
        return hasattr(st, 'secrets') and len(st.secrets) > 0
    except Exception:
        return False


def _to_int(value: Any, default: int, name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning(f"Invalid integer for {name}: {value!r}, using {default}")
        return default


def _to_bool(value: Any, default: bool) -> bool:
    if value is None:
        return default
    return str(value).lower() == "true"


@dataclass
class DataSourceConfig:
    """Data source configuration container"""
    data_file: str = DEFAULT_DATA_FILE
    cache_ttl_seconds: int = 300

    def resolve_path(self) -> Path:
        path = Path(self.data_file)
        if not path.is_absolute():
            path = PROJECT_ROOT / path
        return path

    def to_dict(self) -> Dict[str, Any]:
        return {
            'data_file': self.data_file,
            'cache_ttl_seconds': self.cache_ttl_seconds,
        }


class Config:
    """
    Centralized configuration management

    Usage:
        from institute_admin.config import config

        # Data file location
        path = config.data_file

        # Get app settings
        horizon = config.get_app_setting("UPCOMING_HORIZON_DAYS", 30)

        # Check feature flags
        if config.is_feature_enabled("DEBUG_MODE"):
            ...
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        if self._initialized:
            return

        self.is_cloud = is_running_on_streamlit_cloud()
        self._load_config()
        self._initialized = True

    def _load_config(self):
        """Load configuration based on environment"""
        if self.is_cloud:
            source = self._cloud_settings()
        else:
            source = self._local_settings()

        self._load_app_config(source)
        self._log_config_status()

    def _cloud_settings(self) -> Mapping[str, Any]:
        """Read settings from Streamlit Cloud secrets"""
        import streamlit as st

        logger.info("☁️ Running in STREAMLIT CLOUD")
        return dict(st.secrets.get("APP", {}))

    def _local_settings(self) -> Mapping[str, Any]:
        """Read settings from local .env file + environment"""
        env_paths = [
            Path.cwd() / ".env",
            PROJECT_ROOT / ".env",
        ]

        for env_path in env_paths:
            if env_path.exists():
                load_dotenv(env_path)
                logger.info(f"Loaded .env from: {env_path}")
                break

        logger.info("💻 Running in LOCAL environment")
        return os.environ

    def _load_app_config(self, source: Mapping[str, Any]):
        """Load application-specific settings"""
        self._data_source = DataSourceConfig(
            data_file=source.get("DATA_FILE") or DEFAULT_DATA_FILE,
            cache_ttl_seconds=_to_int(source.get("CACHE_TTL_SECONDS", 300), 300, "CACHE_TTL_SECONDS"),
        )

        self._app_config = {
            # Cache
            "CACHE_TTL_SECONDS": self._data_source.cache_ttl_seconds,

            # Business logic
            "UPCOMING_HORIZON_DAYS": _to_int(
                source.get("UPCOMING_HORIZON_DAYS", 30), 30, "UPCOMING_HORIZON_DAYS"
            ),
            "DEFAULT_PERIOD": source.get("DEFAULT_PERIOD", "This Year"),

            # Localization
            "CURRENCY_SYMBOL": source.get("CURRENCY_SYMBOL", "₹"),
            "TIMEZONE": source.get("TIMEZONE", "Asia/Kolkata"),

            # Feature flags
            "ENABLE_DEBUG_MODE": _to_bool(source.get("ENABLE_DEBUG_MODE"), False),
        }

    def _log_config_status(self):
        """Log configuration status"""
        path = self._data_source.resolve_path()
        logger.info(f"✅ Data file: {path} ({'found' if path.exists() else 'missing'})")
        logger.info(f"✅ Cache TTL: {self._data_source.cache_ttl_seconds}s")

    # ==================== PUBLIC GETTERS ====================

    def get_data_source_config(self) -> Dict[str, Any]:
        """Get data source configuration as dictionary"""
        return self._data_source.to_dict()

    def get_app_setting(self, key: str, default: Any = None) -> Any:
        """Get application setting with default"""
        return self._app_config.get(key, default)

    def is_feature_enabled(self, feature: str) -> bool:
        """Check if feature is enabled"""
        key = f"ENABLE_{feature.upper()}"
        return self._app_config.get(key, True)

    # ==================== PROPERTIES ====================

    @property
    def data_file(self) -> Path:
        return self._data_source.resolve_path()

    @property
    def app_config(self) -> Dict[str, Any]:
        return self._app_config.copy()


# ==================== SINGLETON INSTANCE ====================

config = Config()

# ==================== EXPORTS ====================

IS_RUNNING_ON_CLOUD = config.is_cloud
APP_CONFIG = config.app_config

__all__ = [
    'config',
    'Config',
    'DataSourceConfig',
    'IS_RUNNING_ON_CLOUD',
    'APP_CONFIG',
]
