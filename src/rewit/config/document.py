"""Reading and writing the rewit.yml configuration document."""

from pathlib import Path

import pydantic
import structlog
import yaml

from rewit.core.exceptions import ConfigNotFoundError, ConfigParseError, ValidationError
from rewit.core.models.config import RewitConfig

logger = structlog.get_logger(__name__)


def load_config(path: str | Path) -> RewitConfig:
    """Load a configuration document.

    Only parses and type-checks the document. Callers about to rewrite
    history must also call ``validate_for_rewrite``.
    """
    config_path = Path(path)
    try:
        with config_path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except FileNotFoundError as e:
        raise ConfigNotFoundError(
            f"Error opening input file: {config_path}",
            details={"path": str(config_path)},
        ) from e
    except yaml.YAMLError as e:
        raise ConfigParseError(
            f"Error parsing YAML file: {e}",
            details={"path": str(config_path)},
        ) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigParseError(
            f"Error parsing YAML file: expected a mapping, got {type(data).__name__}",
            details={"path": str(config_path)},
        )

    try:
        config = RewitConfig.model_validate(data)
    except pydantic.ValidationError as e:
        raise ValidationError(
            f"Invalid configuration document {config_path}: {e.error_count()} error(s)",
            details={"path": str(config_path), "errors": e.errors(include_url=False)},
        ) from e

    logger.debug("Loaded configuration", path=str(config_path), repos=len(config.repos))
    return config


def save_config(path: str | Path, config: RewitConfig) -> Path:
    """Write a configuration document, replacing any existing file."""
    config_path = Path(path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    with config_path.open("w", encoding="utf-8") as fh:
        yaml.safe_dump(config.to_document(), fh, allow_unicode=True, sort_keys=False)
    logger.debug("Wrote configuration", path=str(config_path), repos=len(config.repos))
    return config_path
