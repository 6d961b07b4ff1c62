"""
------------------------------------------------------------------------------
Project:        GiroCode
File:           girocode/config.py
Version:        2.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Library configuration: header defaults used by new builders
                and the logging setup. Plain in-memory settings, nothing is
                read from disk or the environment.
------------------------------------------------------------------------------
"""

from typing import Any, ClassVar, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from girocode.logger import setup_logging
from girocode.models.types import CharacterSet, Identification, Version, header_value


class GiroCodeConfig(BaseModel):
    """
    Defaults applied by Epc.builder(). Every value can still be overridden
    per payload through the builder setters.
    """
    model_config = ConfigDict(frozen=True, extra="forbid")

    # Defaults
    DEFAULT_LOG_LEVEL: ClassVar[str] = "WARNING"

    version: Version = Version.V2
    character_set: CharacterSet = CharacterSet.UTF8
    identification: Identification = Identification.SCT
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[str] = None
    log_components: Dict[str, str] = Field(default_factory=dict)

    @field_validator("version", "character_set", "identification", mode="before")
    @classmethod
    def resolve_codes(cls, v: Any, info: ValidationInfo) -> Any:
        """Accepts codes and plain numbers, e.g. version=1 or character_set='2'."""
        return header_value(cls.model_fields[info.field_name].annotation, v)

    @field_validator("log_level")
    @classmethod
    def upper_level(cls, v: str) -> str:
        return v.upper()

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]] = None) -> "GiroCodeConfig":
        """Builds a config from plain values, ignoring None entries."""
        data = {k: v for k, v in (data or {}).items() if v is not None}
        return cls.model_validate(data)

    def apply_logging(self) -> None:
        """Configures the 'girocode' logger hierarchy from this config."""
        setup_logging(
            level=self.log_level,
            log_file=self.log_file,
            component_levels=self.log_components or None
        )
