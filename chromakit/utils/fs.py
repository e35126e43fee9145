"""File helpers: YAML loading and packaged resource lookup.

Provides:
    - load_yaml(path): safe YAML loading with actionable errors
    - packaged_config(name): path of a YAML file shipped in chromakit/configs/

Configs are YAML only; nothing in chromakit writes files.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml

logger = logging.getLogger(__name__)

CONFIG_DIR = Path(__file__).resolve().parent.parent / "configs"


def load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    """Load YAML file safely.

    Parameters
    ----------
    path : Union[str, Path]
        YAML file path

    Returns
    -------
    Dict[str, Any]
        Parsed YAML content

    Raises
    ------
    FileNotFoundError
        If file doesn't exist
    yaml.YAMLError
        If YAML parsing fails
    ValueError
        If the document is not a mapping

    Notes
    -----
    Uses safe_load to prevent arbitrary code execution.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise yaml.YAMLError(f"Failed to parse YAML file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at top level of {path}, got {type(data).__name__}")

    logger.debug("Loaded YAML %s (%d keys)", path, len(data))
    return data


def packaged_config(name: str) -> Path:
    """Return the path of a config file shipped with the package.

    Parameters
    ----------
    name : str
        File name inside chromakit/configs/, e.g. "illuminants.v1.yaml"

    Returns
    -------
    Path
        Absolute path (existence is checked by the loader)
    """
    return CONFIG_DIR / name
