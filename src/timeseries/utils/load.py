from pathlib import Path

import yaml

from timeseries.errors import SettingsError


def load_yaml(p: Path | str):
    """Read a YAML document; an empty file yields an empty mapping."""
    path = Path(p)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError as e:
        raise FileNotFoundError(f"YAML file not found: {path}") from e
    except yaml.YAMLError as e:
        raise SettingsError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SettingsError(
            f"Top-level YAML in {path} must be a mapping, got {type(data).__name__}")
    return data
