from urllib.parse import urlparse

from pydantic import SecretStr
from pydantic_settings import BaseSettings

from insight_core.logging import get_logger

logger = get_logger(__name__)


def get_secret_value(setting: SecretStr | None) -> str | None:
    return None if setting is None else setting.get_secret_value()


def domain_of(url: str) -> str:
    """
    Host component of a url, empty when the url has none.
    """
    return urlparse(url).hostname or ""


def log_settings(settings: BaseSettings, name: str = "Core") -> None:
    logger.info(f"{name} Settings...")
    logger.info(f"  {'Name':<40}{'Default':<40}{'Value':<40}")
    logger.info(f"  {'====':<40}{'=======':<40}{'=====':<40}")
    for field_name, field_info in type(settings).model_fields.items():
        actual_value = getattr(settings, field_name)
        default_value_str = "(required)" if field_info.is_required() else repr(field_info.default)
        logger.info(f"  {field_name:<40}{default_value_str:<40}{actual_value!r:<40}")
