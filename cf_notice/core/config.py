"""
Configuration for cf-notice.

The configuration is built once from the command line, the environment and an
optional YAML file, and then passed as an immutable value to every component.
"""

import dataclasses
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

import yaml

from ..exceptions import ConfigError
from ..utils.validators import resolve_cookie, validate_interval, validate_zone_id
from .reporter import ReportFilter

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_FILE = os.path.join("~", ".config", "cf-notice.json")
DEFAULT_TIMEOUT = 30.0
PROVIDERS = ("cloudflare", "mock")


@dataclass(frozen=True)
class CheckerConfig:
    """Immutable settings for one cf-notice process."""

    storage_path: str
    api_key: str = ""
    cookie: str = ""
    polling_interval: int = 0
    zone_id: str = ""
    zone_index: int = 0
    report_filter: ReportFilter = ReportFilter.ALL
    debug: bool = False
    provider: str = "cloudflare"
    request_timeout: float = DEFAULT_TIMEOUT
    log_settings: Dict[str, Any] = field(default_factory=dict)

    @property
    def periodic(self) -> bool:
        return self.polling_interval > 0

    def with_zone(self, zone_id: str) -> "CheckerConfig":
        """Return a copy of the configuration bound to ``zone_id``."""
        if not validate_zone_id(zone_id):
            raise ConfigError(f"Invalid zone id: {zone_id!r}")
        return dataclasses.replace(self, zone_id=zone_id)


def load_yaml_config(config_path: str) -> Dict:
    """Load an optional YAML configuration file."""
    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f) or {}
        logger.info(f"Configuration loaded from {config_path}")
    except FileNotFoundError:
        raise ConfigError(f"Configuration file '{config_path}' not found")
    except yaml.YAMLError as e:
        raise ConfigError(f"Error parsing config file: {e}")

    if not isinstance(config, dict):
        raise ConfigError(f"Configuration file '{config_path}' must contain a mapping")
    return config


def _first(*values):
    """Return the first value that is not None or an empty string."""
    for value in values:
        if value is not None and value != "":
            return value
    return None


def build_config(
    options: Mapping[str, Any],
    environ: Optional[Mapping[str, str]] = None,
    file_config: Optional[Mapping[str, Any]] = None,
    require_credential: bool = True,
) -> CheckerConfig:
    """
    Build the checker configuration.

    Command-line options win over environment variables, which win over the
    YAML file, which wins over the defaults.

    Args:
        options: Parsed command-line options (None for options not given)
        environ: Environment variables, defaults to ``os.environ``
        file_config: Content of the YAML configuration file
        require_credential: Fail when neither API key nor cookie is set

    Returns:
        CheckerConfig

    Raises:
        ConfigError: If no credential is available or a value is invalid
    """
    environ = os.environ if environ is None else environ
    file_config = file_config or {}

    storage_path = _first(
        options.get("storage"),
        environ.get("CF_NOTICE_PATH"),
        file_config.get("storage_path"),
        DEFAULT_STORAGE_FILE,
    )
    api_key = _first(
        options.get("api_key"), environ.get("CF_API_KEY"), file_config.get("api_key")
    ) or ""
    cookie = _first(
        options.get("cookie"), environ.get("CF_COOKIE"), file_config.get("cookie")
    ) or ""

    try:
        cookie = resolve_cookie(str(cookie))
    except OSError as e:
        raise ConfigError(f"Cannot read cookie file {cookie}: {e}")

    if require_credential and not api_key and not cookie:
        raise ConfigError("Cookie and API key not found")

    interval = _first(options.get("interval"), file_config.get("interval"), 0)
    if not validate_interval(interval):
        raise ConfigError(f"Polling interval must be an integer, got {interval!r}")

    zone_id = _first(options.get("zone_id"), file_config.get("zone_id")) or ""
    if zone_id and not validate_zone_id(zone_id):
        raise ConfigError(f"Invalid zone id: {zone_id!r}")

    zone_index = _first(options.get("zone_index"), file_config.get("zone_no"), 0)
    if not isinstance(zone_index, int) or isinstance(zone_index, bool) or zone_index < 0:
        raise ConfigError(f"Zone number must be a non-negative integer, got {zone_index!r}")

    try:
        report_filter = ReportFilter.from_name(
            _first(options.get("filter"), file_config.get("filter"), ReportFilter.ALL.value)
        )
    except ValueError as e:
        raise ConfigError(str(e))

    provider = _first(file_config.get("provider"), "cloudflare")
    if provider not in PROVIDERS:
        raise ConfigError(f"Unknown provider '{provider}' (choose from {', '.join(PROVIDERS)})")

    timeout = _first(file_config.get("timeout"), DEFAULT_TIMEOUT)
    if not isinstance(timeout, (int, float)) or isinstance(timeout, bool) or timeout <= 0:
        raise ConfigError(f"Request timeout must be a positive number, got {timeout!r}")

    logging_config = file_config.get("logging") or {}
    if not isinstance(logging_config, dict):
        raise ConfigError("The 'logging' section must be a mapping")

    return CheckerConfig(
        storage_path=str(storage_path),
        api_key=str(api_key),
        cookie=cookie,
        polling_interval=interval,
        zone_id=str(zone_id),
        zone_index=zone_index,
        report_filter=report_filter,
        debug=bool(options.get("debug") or file_config.get("debug", False)),
        provider=provider,
        request_timeout=float(timeout),
        log_settings=dict(logging_config),
    )
