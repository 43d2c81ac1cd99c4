"""
View data for the result areas of both forms.
"""
from dataclasses import dataclass
from typing import List, Union
from urllib.parse import quote

from ..data_uri import decode_data_uri
from ..schemas import ModelResponse, SceneCard, StoryboardResponse

MIME_EXTENSIONS = {
    "model/gltf-binary": "glb",
    "model/gltf+json": "gltf",
    "image/png": "png",
    "image/jpeg": "jpg",
    "image/jpg": "jpg",
    "image/webp": "webp",
}


@dataclass(frozen=True)
class SceneCardView:
    title: str
    scene: SceneCard


@dataclass(frozen=True)
class AssetPreview:
    title: str
    download_label: str
    file_name: str
    mime_type: str
    data: bytes


def storyboard_cards(response: StoryboardResponse) -> List[SceneCardView]:
    """One card per scene, titled "Scene N" with N starting at 1."""
    return [
        SceneCardView(title=f"Scene {index}", scene=scene)
        for index, scene in enumerate(response.storyboard, start=1)
    ]


def _asset(title: str, label: str, stem: str, uri: str) -> AssetPreview:
    mime_type, data = decode_data_uri(uri)
    extension = MIME_EXTENSIONS.get(mime_type, "bin")
    return AssetPreview(
        title=title,
        download_label=f"{label} ({extension.upper()})",
        file_name=f"{stem}.{extension}",
        mime_type=mime_type,
        data=data,
    )


def model_asset_previews(response: ModelResponse) -> List[AssetPreview]:
    """Preview cards for the generated model and texture, in that order."""
    return [
        _asset("3D Model Preview", "Download Model", "model", response.model_data_uri),
        _asset("Texture Preview", "Download Texture", "texture", response.texture_data_uri),
    ]


def texture_preview_url(model_description: str, width: int = 300, height: int = 200) -> str:
    """Stock placeholder image seeded by the first five characters of the description."""
    seed = quote(model_description[:5], safe="")
    return f"https://picsum.photos/seed/{seed}/{width}/{height}"


def texture_image(texture: AssetPreview, model_description: str, model_mode: str) -> Union[str, bytes]:
    """Image to show on the texture card.

    Placeholder mode shows the seeded stock image; backend mode shows the
    texture the backend returned.
    """
    if model_mode == "placeholder":
        return texture_preview_url(model_description)
    return texture.data
