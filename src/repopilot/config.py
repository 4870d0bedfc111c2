"""Config file loading."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from repopilot.contracts.config import RepoPilotConfig
from repopilot.contracts.exceptions import ConfigError


def load_config(path: str | Path) -> RepoPilotConfig:
    """Load and validate a JSON config file."""
    config_path = Path(path).expanduser().resolve()

    try:
        raw_payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
        return RepoPilotConfig.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc
