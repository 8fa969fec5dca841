import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from src.config.models import SiteConfig

logger = logging.getLogger(__name__)


def load_config(path: Path) -> SiteConfig:
    """
    Load and validate the site configuration file.
    Raises FileNotFoundError if file missing.
    Raises ValueError if YAML or schema invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found at: {path}")

    with open(path) as f:
        content = f.read()

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML syntax in config file: {e}") from e

    try:
        config = SiteConfig.model_validate(data)
    except ValidationError as e:
        # Re-raise with a clear message for the caller/logs
        raise ValueError(f"Config validation failed:\n{e}") from e

    logger.info("Config loaded from %s (site=%s)", path, config.site.name)
    return config


def validate_startup(config: SiteConfig) -> None:
    """
    Validate operational requirements before startup.
    Raises RuntimeError listing every missing environment variable.
    """
    missing = [name for name in config.ops.required_env if name not in os.environ]

    if config.email.backend == "ses" and not config.email.region:
        missing.append("email.region")
    if config.uploads.backend == "s3" and not config.uploads.bucket:
        missing.append("uploads.bucket")

    if missing:
        raise RuntimeError(f"Missing required configuration: {', '.join(missing)}")
