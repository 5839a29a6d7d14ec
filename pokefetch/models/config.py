"""
Pydantic model for application configuration.
Provides validation for all settings.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_API_BASE_URL = "https://pokeapi-proxy.freecodecamp.rocks/api"
DEFAULT_IDENTIFIER = "1"


class FetchConfig(BaseModel):
    """A validated configuration model for the application."""

    model_config = ConfigDict(validate_assignment=True, str_strip_whitespace=True)

    # API
    api_base_url: str = DEFAULT_API_BASE_URL
    identifier: str = DEFAULT_IDENTIFIER
    timeout: float = 30.0

    # Output
    output_dir: str = "."
    download_sprites: bool = True

    # Internal fields not loaded from INI file
    config_path: str = Field("", repr=False)

    @field_validator("api_base_url")
    @classmethod
    def validate_api_base_url(cls, v: str) -> str:
        """Requires an http(s) URL and strips any trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("API URL must start with http:// or https://.")
        return v.rstrip("/")

    @field_validator("identifier")
    @classmethod
    def validate_identifier(cls, v: str) -> str:
        """Accepts a Pokémon name or number; the API expects lower case names."""
        if not v:
            raise ValueError("Identifier cannot be empty.")
        if "/" in v or "?" in v or "#" in v:
            raise ValueError(f"Identifier contains invalid characters: {v!r}")
        return v.lower()

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0 or v > 300:
            raise ValueError("Timeout must be greater than 0 and at most 300 seconds.")
        return v

    @field_validator("output_dir")
    @classmethod
    def validate_output_dir(cls, v: str) -> str:
        if not v:
            raise ValueError("Output directory cannot be empty.")
        return v

    @classmethod
    def get_ini_keys(cls) -> set[str]:
        """Returns a set of all keys that are expected in the INI file."""
        internal_fields = {"config_path"}
        return {key for key in cls.model_fields if key not in internal_fields}
