"""
Startup wiring: configuration, logging and the custom OID mapping file.
"""
from typing import Optional

from certoids.app_config import AppConfig
from certoids.app_logger import AppLogger
from certoids.builtin import DEFAULT_REGISTRY
from certoids.loader import DEFAULT_MAP_KEY, load_custom_oid_file
from certoids.registry import OidRegistry


def custom_oid_file_setting(app_config: AppConfig) -> Optional[str]:
    """Return the configured mapping file, resolving per-platform values."""
    value = app_config.get('custom_oid_file')
    if isinstance(value, dict):
        value = app_config.get_platform_setting('custom_oid_file')
    if isinstance(value, str) and value:
        return value
    return None


def bootstrap(config_path: str = 'certoids.yaml', app_config: Optional[AppConfig] = None,
              registry: Optional[OidRegistry] = None) -> OidRegistry:
    """Configure logging and load the configured custom OIDs into the registry."""
    if app_config is None:
        app_config = AppConfig(config_path)
    if not AppLogger._configured:
        AppLogger.configure(app_config)
    logger = AppLogger.get(__name__)

    registry = registry if registry is not None else DEFAULT_REGISTRY
    custom_oid_file = custom_oid_file_setting(app_config)
    if custom_oid_file is None:
        logger.info("No custom OID mapping file configured")
        return registry

    map_key = app_config.get('oid_map_key', DEFAULT_MAP_KEY) or DEFAULT_MAP_KEY
    load_custom_oid_file(custom_oid_file, str(map_key), registry=registry)
    return registry
