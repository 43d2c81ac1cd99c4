"""
Request and response shapes for storyboard and 3D model generation.

All models are frozen and serialize with camelCase aliases
(``scriptOutline``, ``sceneDescription``, ...).
"""
from dataclasses import dataclass, field
from typing import Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from .base_config import ACCEPTED_IMAGE_TYPES, MAX_FILE_SIZE, MIN_TEXT_LENGTH
from .data_uri import decode_data_uri

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a boundary operation: a value, field errors, or an error message."""

    success: bool
    value: Optional[T] = None
    field_errors: Dict[str, str] = field(default_factory=dict)
    error: Optional[str] = None

    @classmethod
    def ok(cls, value: T) -> "Result[T]":
        return cls(success=True, value=value)

    @classmethod
    def invalid(cls, field_errors: Dict[str, str]) -> "Result[T]":
        return cls(success=False, field_errors=dict(field_errors))

    @classmethod
    def failed(cls, error: str) -> "Result[T]":
        return cls(success=False, error=error)


class StudioModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        protected_namespaces=(),
    )


def _require_min_length(value: str) -> str:
    value = value.strip()
    if len(value) < MIN_TEXT_LENGTH:
        raise ValueError(f"must be at least {MIN_TEXT_LENGTH} characters")
    return value


class StoryboardRequest(StudioModel):
    script_outline: str

    @field_validator("script_outline")
    @classmethod
    def _check_outline(cls, value: str) -> str:
        return _require_min_length(value)


class SceneCard(StudioModel):
    scene_description: str
    camera_angle: str
    scene_layout: str


class StoryboardResponse(StudioModel):
    storyboard: List[SceneCard]


class ModelRequest(StudioModel):
    concept_art_data_uri: str
    model_description: str

    @field_validator("concept_art_data_uri")
    @classmethod
    def _check_concept_art(cls, value: str) -> str:
        mime_type, data = decode_data_uri(value)
        if mime_type not in ACCEPTED_IMAGE_TYPES:
            raise ValueError(".jpg, .jpeg, .png and .webp files are accepted.")
        if len(data) > MAX_FILE_SIZE:
            raise ValueError("Max file size is 5MB.")
        return value

    @field_validator("model_description")
    @classmethod
    def _check_description(cls, value: str) -> str:
        return _require_min_length(value)


class ModelResponse(StudioModel):
    model_data_uri: str
    texture_data_uri: str

    @field_validator("model_data_uri", "texture_data_uri")
    @classmethod
    def _check_data_uri(cls, value: str) -> str:
        decode_data_uri(value)
        return value
