"""
Pydantic models for the Pokémon resource returned by the API.

Decoding mirrors a plain struct decoder: absent or null keys, null list items
and a null body all fall back to zero values, unknown keys are ignored, and a
value of the wrong type is rejected.
"""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from pokefetch.exceptions import MalformedResponseError

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

Int32 = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]


class WireModel(BaseModel):
    """Base for all wire models; applies the zero-value decoding rules."""

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def nulls_to_zero(cls, data: Any) -> Any:
        if data is None:
            return {}
        if isinstance(data, dict):
            return {
                k: [{} if item is None else item for item in v]
                if isinstance(v, list)
                else v
                for k, v in data.items()
                if v is not None
            }
        return data


class Stat(WireModel):
    name: str = ""
    url: str = ""


class StatInfo(WireModel):
    stat: Stat = Field(default_factory=Stat)
    base_stat: Int32 = 0

    def __str__(self) -> str:
        return f"{self.stat.name}={self.base_stat}"


class Sprites(WireModel):
    front_default: str = ""
    back_default: str = ""

    def by_side(self) -> list[tuple[str, str]]:
        """Returns (side, url) pairs in download order: front, then back."""
        return [("front", self.front_default), ("back", self.back_default)]


class Pokemon(WireModel):
    """A single Pokémon as decoded from the API."""

    name: str = ""
    base_experience: Int32 = 0
    height: Int32 = 0
    id: Int32 = 0
    sprites: Sprites = Field(default_factory=Sprites)
    stats: list[StatInfo] = Field(default_factory=list)


def parse_pokemon(body: bytes | str) -> Pokemon:
    """
    Decodes a raw API response body into a Pokemon.

    Raises:
        MalformedResponseError: If the body is not JSON or a field has the wrong type.
    """
    try:
        return Pokemon.model_validate_json(body)
    except ValidationError as e:
        raise MalformedResponseError(f"error parsing JSON: {e}") from e
