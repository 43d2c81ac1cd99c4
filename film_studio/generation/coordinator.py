from typing import Optional, Sequence
import asyncio
import logging

from pydantic import BaseModel

from ..base_config import get_model_generation_delay, get_model_generation_mode
from ..errors import GenerationFailure, SchemaValidationError
from ..schemas import ModelRequest, ModelResponse, StoryboardRequest, StoryboardResponse
from .agents.backends import GenerationBackend, get_backend
from .agents.prompt_templates import MODEL_TEMPLATE, STORYBOARD_TEMPLATE, PromptTemplate
from .agents.response_parser import parse_response
from .placeholders import placeholder_model_response

logger = logging.getLogger(__name__)


class GenerationCoordinator:
    """Runs validated requests through a prompt template and a generation backend.

    Each operation makes at most one backend call: no retries, no streaming.
    Any backend or schema failure is raised as ``GenerationFailure``.
    """

    def __init__(
        self,
        backend: Optional[GenerationBackend] = None,
        model_mode: Optional[str] = None,
        placeholder_delay: Optional[float] = None
    ):
        logger.info("Initializing GenerationCoordinator")
        self._backend = backend
        self.model_mode = model_mode or get_model_generation_mode()
        self.placeholder_delay = (
            placeholder_delay if placeholder_delay is not None else get_model_generation_delay()
        )

    @property
    def backend(self) -> GenerationBackend:
        if self._backend is None:
            self._backend = get_backend()
        return self._backend

    async def generate_storyboard(self, request: StoryboardRequest) -> StoryboardResponse:
        """Generate a storyboard from a validated script outline."""
        logger.info("Starting storyboard generation")
        prompt = STORYBOARD_TEMPLATE.render(script_outline=request.script_outline)
        response = await self._run_template(STORYBOARD_TEMPLATE, prompt)
        logger.info(f"Generated storyboard with {len(response.storyboard)} scenes")
        return response

    async def generate_3d_model(self, request: ModelRequest) -> ModelResponse:
        """Generate model and texture assets from concept art.

        In placeholder mode no backend is called; a fixed empty model and
        texture are returned after the configured delay.
        """
        logger.info(f"Starting 3D model generation ({self.model_mode} mode)")
        if self.model_mode == "placeholder":
            await asyncio.sleep(self.placeholder_delay)
            return placeholder_model_response()

        prompt = MODEL_TEMPLATE.render(model_description=request.model_description)
        return await self._run_template(MODEL_TEMPLATE, prompt, media=[request.concept_art_data_uri])

    async def _run_template(
        self,
        template: PromptTemplate,
        prompt: str,
        media: Sequence[str] = ()
    ) -> BaseModel:
        try:
            raw_response = await self.backend.generate(template.name, template.instructions, prompt, media)
        except Exception as e:
            logger.error(f"{template.name} failed: {str(e)}", exc_info=True)
            raise GenerationFailure(f"Generation backend failed: {str(e)}", template.name) from e

        parsed = parse_response(raw_response, template.output_schema)
        if not parsed.success:
            raise SchemaValidationError(parsed.error, template.name, raw_response=raw_response)
        return parsed.value
