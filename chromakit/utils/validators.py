"""YAML schema validation and config loading.

Provides centralized validation for chromakit's configuration files using
pydantic:
    - Illuminants schema (illuminants.v1.yaml): named reference white points

All loaders fail fast with actionable messages (file path, offending entry,
expected ranges).

Units:
    - White points: CIE XYZ tristimulus values normalised to Y = 1

Usage:
    from chromakit.utils import validators

    table = validators.load_illuminants()          # packaged table
    table = validators.load_illuminants("my.yaml") # custom table
    d50 = table.get("D50")
"""

import logging
import math
from pathlib import Path
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

logger = logging.getLogger(__name__)

ILLUMINANTS_FILE = "illuminants.v1.yaml"


# ============================================================================
# ILLUMINANTS SCHEMA V1
# ============================================================================

class IlluminantSpec(BaseModel):
    """One reference white (XYZ normalised to Y = 1)."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Illuminant identifier, e.g. D65")
    description: str = Field("", description="Free-form description")
    xyz: Tuple[float, float, float] = Field(..., description="Tristimulus (X, Y, Z)")

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Illuminant name must be non-empty")
        return v

    @field_validator('xyz')
    @classmethod
    def validate_xyz(cls, v: Tuple[float, float, float]) -> Tuple[float, float, float]:
        for component in v:
            if not math.isfinite(component) or component <= 0.0:
                raise ValueError(f"XYZ components must be finite and positive, got {v}")
        if abs(v[1] - 1.0) > 1e-9:
            raise ValueError(f"White point must be normalised to Y=1, got Y={v[1]}")
        return v


class IlluminantsV1(BaseModel):
    """Table of reference whites (illuminants.v1.yaml schema)."""
    model_config = ConfigDict(frozen=True)

    schema_version: str = Field("illuminants.v1", alias="schema")
    default: str = Field("D65", description="Name of the default white point")
    illuminants: List[IlluminantSpec] = Field(..., min_length=1)

    @field_validator('schema_version')
    @classmethod
    def validate_schema(cls, v: str) -> str:
        if v != "illuminants.v1":
            raise ValueError(f"Unsupported schema: {v} (expected illuminants.v1)")
        return v

    @model_validator(mode='after')
    def validate_names(self) -> 'IlluminantsV1':
        seen = set()
        for spec in self.illuminants:
            key = spec.name.upper()
            if key in seen:
                raise ValueError(f"Duplicate illuminant name: {spec.name}")
            seen.add(key)
        if self.default.upper() not in seen:
            raise ValueError(f"Default illuminant {self.default!r} is not defined in the table")
        return self

    @property
    def names(self) -> List[str]:
        return [spec.name for spec in self.illuminants]

    def get(self, name: str) -> IlluminantSpec:
        """Look up an illuminant by name (case-insensitive).

        Raises
        ------
        KeyError
            If no illuminant has that name
        """
        key = name.strip().upper()
        for spec in self.illuminants:
            if spec.name.upper() == key:
                return spec
        raise KeyError(f"Unknown illuminant {name!r}; known: {', '.join(self.names)}")


# ============================================================================
# PUBLIC API
# ============================================================================

def load_illuminants(path: Optional[Union[str, Path]] = None) -> IlluminantsV1:
    """Load and validate an illuminant table from YAML.

    Parameters
    ----------
    path : Union[str, Path], optional
        Path to an illuminants.v1.yaml file; None loads the packaged table

    Returns
    -------
    IlluminantsV1
        Validated illuminant table

    Raises
    ------
    FileNotFoundError
        If path doesn't exist
    ValueError
        If validation fails (with actionable error message)
    """
    from . import fs

    path = Path(path) if path is not None else fs.packaged_config(ILLUMINANTS_FILE)
    if not path.exists():
        raise FileNotFoundError(f"Illuminants config not found: {path}")

    data = fs.load_yaml(path)
    try:
        table = IlluminantsV1(**data)
    except Exception as e:
        raise ValueError(f"Illuminants config validation failed at {path}: {e}") from e

    logger.debug("Loaded %d illuminants from %s", len(table.illuminants), path)
    return table
