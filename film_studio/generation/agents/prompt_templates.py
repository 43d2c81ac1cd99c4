from dataclasses import dataclass
from typing import Type

from pydantic import BaseModel

from ...base_config import AGENT_INSTRUCTIONS
from ...schemas import ModelResponse, StoryboardResponse


@dataclass(frozen=True)
class PromptTemplate:
    """A named prompt with its system instructions and expected output schema."""

    name: str
    instructions: str
    template: str
    output_schema: Type[BaseModel]

    def render(self, **fields: str) -> str:
        """Substitute request fields verbatim into the template."""
        return self.template.format(**fields)


STORYBOARD_TEMPLATE = PromptTemplate(
    name="generateStoryboardPrompt",
    instructions=AGENT_INSTRUCTIONS["storyboard_artist"],
    template="""You are a professional storyboard artist. Based on the provided script outline, generate a storyboard with suggested camera angles and scene layouts for each scene.

Script Outline:
{script_outline}

Return the storyboard in this exact JSON format:
{{
    "storyboard": [
        {{
            "sceneDescription": "description of the scene",
            "cameraAngle": "suggested camera angle for the scene",
            "sceneLayout": "suggested scene layout"
        }}
    ]
}}

Storyboard:
""",
    output_schema=StoryboardResponse,
)


MODEL_TEMPLATE = PromptTemplate(
    name="generate3DModelPrompt",
    instructions=AGENT_INSTRUCTIONS["modeler"],
    template="""You are an expert 3D modeler. Generate a 3D model and texture based on the provided concept art and description. Return the 3D model and the texture as data URIs.

Concept Art: (attached image)
Description: {model_description}

Return the assets in this exact JSON format:
{{
    "modelDataUri": "data:<mimetype>;base64,<encoded_data>",
    "textureDataUri": "data:<mimetype>;base64,<encoded_data>"
}}
""",
    output_schema=ModelResponse,
)
