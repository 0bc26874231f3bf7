"""Localiser configuration settings."""

from typing import Any, Optional
import json
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class I18nSettings(BaseSettings):
    """Localisation configuration settings.

    The translation table itself is supplied by the host application; these
    settings only control how it is read and which language starts active.
    """

    DEFAULT_LANGUAGE: str = Field(default="", alias="I18N_DEFAULT_LANGUAGE")
    DELIMITER: str = Field(default=",", alias="I18N_DELIMITER")
    KEY_HEADER: bool = Field(default=False, alias="I18N_KEY_HEADER")
    LANGUAGE_CODES: Any = Field(
        default_factory=dict,
        alias="I18N_LANGUAGE_CODES",
        description="Mapping of table header name to OS locale identifier",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("LANGUAGE_CODES", mode="before")
    @classmethod
    def _parse_language_codes(cls, v: Optional[Any]) -> Any:
        """Allow `I18N_LANGUAGE_CODES` to be provided as a JSON string (possibly
        wrapped in single or double quotes) or as a native dict.
        """
        if v is None:
            return {}

        if isinstance(v, dict):
            return v

        if isinstance(v, str):
            s = v.strip()
            if (s.startswith("'") and s.endswith("'")) or (
                s.startswith('"') and s.endswith('"')
            ):
                s = s[1:-1]
            try:
                return json.loads(s) if s else {}
            except (json.JSONDecodeError, ValueError) as e:
                raise ValueError(
                    f"Invalid I18N_LANGUAGE_CODES JSON: {e} (value: {s[:80]}...)"
                ) from e

        raise ValueError("I18N_LANGUAGE_CODES must be a JSON string or a mapping")

    @field_validator("DELIMITER")
    @classmethod
    def _check_delimiter(cls, v: str) -> str:
        if len(v) != 1 or v == '"':
            raise ValueError("I18N_DELIMITER must be a single non-quote character")
        return v


class Settings(BaseSettings):
    """Localiser configuration settings."""

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production."""
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        settings_map = {
            "i18n": I18nSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the settings instance
settings = Settings()
