from src.config.loader import load_config, validate_startup
from src.config.models import SiteConfig

__all__ = ["SiteConfig", "load_config", "validate_startup"]
