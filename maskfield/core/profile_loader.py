"""Loading of named mask profiles from YAML or JSON files."""

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .config import FillDirection, MaskConfig
from .exceptions import ConfigurationError, ProfileError
from .presets import PRESETS, get_preset

logger = logging.getLogger(__name__)


class ProfileConfig(BaseModel):
    """Pydantic model for one profile entry."""

    preset: Optional[str] = Field(None, description="Built-in preset to start from")
    template: Optional[str] = Field(None, description="Template with placeholder slots")
    replacement_char: Optional[str] = Field(
        None, min_length=1, max_length=1, description="Placeholder character"
    )
    allowed_chars: Optional[str] = Field(
        None, description="Characters a user may enter; empty or 'all' for any"
    )
    direction: Optional[str] = Field(None, description="left_to_right or right_to_left")
    left_affix: Optional[str] = Field(None, description="Fixed prefix")
    right_affix: Optional[str] = Field(None, description="Fixed suffix")

    @field_validator("preset")
    @classmethod
    def validate_preset(cls, v: Any) -> Any:
        """Validate the preset name is a built-in one."""
        if v is not None and v.strip().lower() not in PRESETS:
            raise ValueError(f"Unknown preset '{v}'. Valid presets: {sorted(PRESETS)}")
        return v

    @field_validator("direction")
    @classmethod
    def validate_direction(cls, v: Any) -> Any:
        """Validate fill direction."""
        if v is not None:
            try:
                FillDirection.coerce(v)
            except ConfigurationError as e:
                raise ValueError(e.message) from e
        return v

    def to_mask_config(self) -> MaskConfig:
        """Build the configuration, applying overrides on top of the preset."""
        base = get_preset(self.preset) if self.preset else MaskConfig()
        overrides = self.model_dump(exclude_none=True, exclude={"preset"})
        return base.evolve(**overrides) if overrides else base


class ProfileFileSchema(BaseModel):
    """Pydantic model for profile file schema validation."""

    version: Optional[str] = Field("1.0", description="Profile schema version")
    profiles: dict[str, ProfileConfig] = Field(
        default_factory=dict, description="Named profiles"
    )


class ProfileLoader:
    """
    Loads profile files into :class:`MaskConfig` objects.

    Examples:
        >>> loader = ProfileLoader()
        >>> configs = loader.load_profiles(Path("fields.yaml"))
        >>> configs["us_phone"].template
        '(###) ###-####'
    """

    def load_profiles(self, path: Union[str, Path]) -> dict[str, MaskConfig]:
        """Load every profile in ``path``.

        Raises:
            ProfileError: If the file is missing, unreadable or invalid
        """
        path = Path(path)
        schema = self._load_schema(path)

        configs: dict[str, MaskConfig] = {}
        for name, profile in schema.profiles.items():
            try:
                configs[name] = profile.to_mask_config()
            except ConfigurationError as e:
                raise ProfileError(
                    f"Invalid profile '{name}': {e.message}",
                    profile_name=name,
                    config_file=str(path),
                ) from e

        logger.info(f"Loaded {len(configs)} profiles from {path}")
        return configs

    def load_profile(self, path: Union[str, Path], name: str) -> MaskConfig:
        """Load a single named profile from ``path``."""
        configs = self.load_profiles(path)
        if name not in configs:
            error = ProfileError(
                f"Profile '{name}' not found in {path}",
                profile_name=name,
                config_file=str(path),
            )
            if configs:
                error.add_recovery_suggestion(f"Available profiles: {', '.join(sorted(configs))}")
            raise error
        return configs[name]

    def _load_schema(self, path: Path) -> ProfileFileSchema:
        if not path.exists():
            raise ProfileError(
                f"Profile file not found: {path}",
                config_file=str(path),
                recovery_suggestions=["Check the --profiles-file path or MASKFIELD_PROFILES"],
            )

        try:
            with open(path, encoding="utf-8") as f:
                if path.suffix in [".yaml", ".yml"]:
                    data = yaml.safe_load(f)
                elif path.suffix == ".json":
                    data = json.load(f)
                else:
                    raise ProfileError(
                        f"Unsupported profile file format: {path.suffix}",
                        config_file=str(path),
                    )
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ProfileError(f"Could not parse {path}: {e}", config_file=str(path)) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ProfileError(
                f"Profile file must contain a mapping, got {type(data).__name__}",
                config_file=str(path),
            )

        try:
            return ProfileFileSchema.model_validate(data)
        except ValidationError as e:
            raise ProfileError(
                f"Profile validation failed: {e}",
                config_file=str(path),
            ) from e


def load_profiles(path: Union[str, Path]) -> dict[str, MaskConfig]:
    """Convenience wrapper around :meth:`ProfileLoader.load_profiles`."""
    return ProfileLoader().load_profiles(path)
