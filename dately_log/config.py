"""Configuration: frozen dataclass built from env vars and an optional YAML file."""

import logging
import os
from dataclasses import dataclass
from datetime import timedelta

import yaml

from dately_log.errors import ConfigError

logger = logging.getLogger(__name__)

MAX_FILES_LIMIT = 200000
MIN_MAX_AGE = timedelta(days=1)
DEFAULT_PATTERN = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_MAX_AGE = timedelta(days=30)
DEFAULT_MAX_SIZE = 10 * 1024 * 1024


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class RotationConfig:
    """Limits enforced by the rotating writer."""

    max_age: timedelta = DEFAULT_MAX_AGE
    max_size: int = DEFAULT_MAX_SIZE
    max_files: int = 0  # 0 = unlimited
    truncate: bool = False


@dataclass(frozen=True)
class Config:
    log_dir: str = "./logs"
    log_filename: str = "application.log"
    max_file_size_bytes: int = DEFAULT_MAX_SIZE  # 10 MB
    max_file_count: int = 0  # 0 = unlimited
    max_age_days: int = 30
    truncate: bool = False
    log_pattern: str = DEFAULT_PATTERN

    @property
    def base_filename(self) -> str:
        return os.path.join(self.log_dir, self.log_filename)

    @property
    def max_age(self) -> timedelta:
        return timedelta(days=self.max_age_days)

    @property
    def rotation(self) -> RotationConfig:
        return RotationConfig(
            max_age=self.max_age,
            max_size=self.max_file_size_bytes,
            max_files=self.max_file_count,
            truncate=self.truncate,
        )


def validate_max_size(max_size: int) -> None:
    if max_size <= 0:
        raise ConfigError(f"max_size must be greater than zero, got {max_size}")


def validate_max_files(max_files: int) -> None:
    if max_files < 0:
        raise ConfigError(f"max_files cannot be negative, got {max_files}")
    if max_files > MAX_FILES_LIMIT:
        raise ConfigError(f"max_files cannot exceed {MAX_FILES_LIMIT}, got {max_files}")


def validate_max_age(max_age: timedelta) -> None:
    if max_age < MIN_MAX_AGE:
        raise ConfigError(f"max_age cannot be less than one day, got {max_age}")


def validate_rotation(rotation: RotationConfig) -> RotationConfig:
    validate_max_size(rotation.max_size)
    validate_max_files(rotation.max_files)
    validate_max_age(rotation.max_age)
    return rotation


def validate(config: Config) -> Config:
    """Raise ConfigError if any rotation limit is out of range."""
    validate_rotation(config.rotation)
    return config


def load_yaml_config(path: str | None) -> dict:
    """Return the ``rotation`` section of a YAML file, or {} if there is none."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        logger.info("Loaded YAML config from %s", path)
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}
    return data.get("rotation", data) or {}


def load_config(path: str | None = None) -> Config:
    """Build Config from env vars, then YAML, then defaults (in that precedence)."""
    yaml_data = load_yaml_config(path or os.environ.get("CONFIG_PATH"))

    def pick(env_key, yaml_key, default):
        raw = os.environ.get(env_key)
        if raw is not None:
            return raw
        return yaml_data.get(yaml_key, default)

    # MAX_FILE_SIZE_BYTES takes precedence over MAX_FILE_SIZE_MB
    raw_bytes = os.environ.get("MAX_FILE_SIZE_BYTES")
    raw_mb = os.environ.get("MAX_FILE_SIZE_MB")
    if raw_bytes is not None:
        max_size = int(raw_bytes)
    elif raw_mb is not None:
        max_size = int(float(raw_mb) * 1024 * 1024)
    elif "max_file_size_mb" in yaml_data:
        max_size = int(float(yaml_data["max_file_size_mb"]) * 1024 * 1024)
    else:
        max_size = int(yaml_data.get("max_file_size_bytes", Config.max_file_size_bytes))

    config = Config(
        log_dir=pick("LOG_DIR", "log_dir", Config.log_dir),
        log_filename=pick("LOG_FILENAME", "log_filename", Config.log_filename),
        max_file_size_bytes=max_size,
        max_file_count=int(pick("MAX_FILE_COUNT", "max_file_count", Config.max_file_count)),
        max_age_days=int(pick("MAX_AGE_DAYS", "max_age_days", Config.max_age_days)),
        truncate=_parse_bool(pick("TRUNCATE_ON_OPEN", "truncate", Config.truncate)),
        log_pattern=pick("LOG_PATTERN", "log_pattern", Config.log_pattern),
    )
    return validate(config)
