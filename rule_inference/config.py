# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load and validate all configuration from environment
#   variables / .env file. Provides typed config objects
#   to all other modules.
#
# CLASSES:
# --------
# - MySQLConfig (dataclass)
#     host: str          (default "localhost")
#     port: int          (default 3306)
#     user: str          (default "root")
#     password: str      (default "root")
#     database: str      (default "app_db")
#
# - MongoConfig (dataclass)
#     host: str          (default "localhost")
#     port: int          (default 27017)
#     user: str | None   (default None)
#     password: str | None (default None)
#     database: str      (default "app_db")
#
# - InferenceConfig (dataclass)
#     sample_size: int              (default 50)   → values sent to the classifier
#     ai_provider: str              (default "gemini")
#     ai_model: str                 (default "gemini-2.0-flash")
#     requests_per_minute: int|None (default None) → scheduler falls back to 10
#     api_key: str | None           (default None)
#
# - AppConfig (dataclass)
#     mysql: MySQLConfig
#     mongo: MongoConfig
#     inference: InferenceConfig
#     data_store: str    (default "mysql", or "mongodb")
#
# FUNCTIONS:
# ----------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# - reset_config() -> None
#     Drop the cached singleton so the next get_config() re-reads the env.
#
# USAGE:
# ------
#   from rule_inference.config import get_config
#   config = get_config()
#   print(config.mysql.host)
#   print(config.inference.sample_size)
#
# ==============================================

import os
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path

from dotenv import load_dotenv


SUPPORTED_DATA_STORES = ("mysql", "mongodb")


@dataclass
class MySQLConfig:
    """MySQL database configuration."""
    host: str = "localhost"
    port: int = 3306
    user: str = "root"
    password: str = "root"
    database: str = "app_db"


@dataclass
class MongoConfig:
    """MongoDB database configuration."""
    host: str = "localhost"
    port: int = 27017
    user: Optional[str] = None
    password: Optional[str] = None
    database: str = "app_db"


@dataclass
class InferenceConfig:
    """Settings for one inference run (classifier sampling and throttling)."""
    sample_size: int = 50
    ai_provider: str = "gemini"
    ai_model: str = "gemini-2.0-flash"
    requests_per_minute: Optional[int] = None
    api_key: Optional[str] = None

    def __post_init__(self):
        if self.sample_size <= 0:
            raise ValueError(f"sample_size must be positive, got {self.sample_size}")
        if self.requests_per_minute is not None and self.requests_per_minute <= 0:
            raise ValueError(
                f"requests_per_minute must be positive, got {self.requests_per_minute}"
            )


@dataclass
class AppConfig:
    """Main application configuration."""
    mysql: MySQLConfig = field(default_factory=MySQLConfig)
    mongo: MongoConfig = field(default_factory=MongoConfig)
    inference: InferenceConfig = field(default_factory=InferenceConfig)
    data_store: str = "mysql"

    def __post_init__(self):
        if self.data_store not in SUPPORTED_DATA_STORES:
            raise ValueError(
                f"Unknown data store '{self.data_store}', "
                f"expected one of {', '.join(SUPPORTED_DATA_STORES)}"
            )


# Singleton instance
_config_instance: Optional[AppConfig] = None


def _optional_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return int(raw)


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.
    
    Returns:
        AppConfig: Application configuration
    """
    global _config_instance
    
    if _config_instance is not None:
        return _config_instance
    
    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)
    
    # Build MySQL configuration
    mysql_config = MySQLConfig(
        host=os.getenv("MYSQL_HOST", "localhost"),
        port=int(os.getenv("MYSQL_PORT", "3306")),
        user=os.getenv("MYSQL_USER", "root"),
        password=os.getenv("MYSQL_PASSWORD", "root"),
        database=os.getenv("MYSQL_DATABASE", "app_db")
    )
    
    # Build MongoDB configuration
    mongo_config = MongoConfig(
        host=os.getenv("MONGO_HOST", "localhost"),
        port=int(os.getenv("MONGO_PORT", "27017")),
        user=os.getenv("MONGO_USER") or None,
        password=os.getenv("MONGO_PASSWORD") or None,
        database=os.getenv("MONGO_DATABASE", "app_db")
    )
    
    # Build inference configuration
    inference_config = InferenceConfig(
        sample_size=int(os.getenv("INFERENCE_SAMPLE_SIZE", "50")),
        ai_provider=os.getenv("AI_PROVIDER", "gemini"),
        ai_model=os.getenv("AI_MODEL", "gemini-2.0-flash"),
        requests_per_minute=_optional_int("REQUESTS_PER_MINUTE"),
        api_key=os.getenv("GOOGLE_API_KEY") or None
    )
    
    # Build main application configuration
    _config_instance = AppConfig(
        mysql=mysql_config,
        mongo=mongo_config,
        inference=inference_config,
        data_store=os.getenv("DATA_STORE", "mysql").lower()
    )
    
    return _config_instance


def reset_config() -> None:
    """Forget the cached configuration."""
    global _config_instance
    _config_instance = None
