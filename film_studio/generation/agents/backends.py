import asyncio
import logging
import os
import time
from typing import Any, Dict, List, Optional, Sequence

import google.generativeai as genai
from agents import Agent, ModelSettings, Runner

from ...base_config import get_backend_name, get_model_config
from ...data_uri import decode_data_uri
from ...logging_utils import log_api_call

logger = logging.getLogger(__name__)


class GenerationBackend:
    """A generative-AI backend that turns a rendered prompt into raw text."""

    provider = "base"

    def __init__(self, model_config: Optional[Dict[str, Any]] = None):
        self.model_config = model_config or get_model_config(self.provider)
        self.model = self.model_config["model"]

    async def generate(
        self,
        template_name: str,
        instructions: str,
        prompt: str,
        media: Sequence[str] = ()
    ) -> str:
        """Run one generation call and return the backend's raw output.

        Every call is logged through ``log_api_call``; errors propagate.
        """
        start_time = time.time()
        response_text = ""
        error = None
        status = "success"

        try:
            response_text = await self._generate(template_name, instructions, prompt, media)
            return response_text
        except Exception as e:
            error = str(e)
            status = "error"
            raise
        finally:
            log_api_call(
                provider=self.provider,
                model=self.model,
                prompt_length=len(prompt),
                response_length=len(response_text or ""),
                duration=time.time() - start_time,
                status=status,
                error=error,
                metadata={
                    "template": template_name,
                    "media_count": len(media),
                    "temperature": self.model_config.get("temperature"),
                }
            )

    async def _generate(self, template_name: str, instructions: str, prompt: str, media: Sequence[str]) -> str:
        raise NotImplementedError


class AgentsBackend(GenerationBackend):
    """Backend running prompts through the OpenAI Agents SDK."""

    provider = "openai"

    def __init__(self, model_config: Optional[Dict[str, Any]] = None):
        super().__init__(model_config)
        if not os.environ.get("OPENAI_API_KEY"):
            logger.warning("OPENAI_API_KEY not found in environment variables")

    def _build_agent(self, template_name: str, instructions: str) -> Agent:
        return Agent(
            name=template_name,
            instructions=instructions,
            model=self.model,
            model_settings=ModelSettings(
                temperature=self.model_config.get("temperature"),
                max_tokens=self.model_config.get("max_tokens"),
            ),
        )

    @staticmethod
    def _build_input(prompt: str, media: Sequence[str]) -> Any:
        if not media:
            return prompt
        content: List[Dict[str, Any]] = [{"type": "input_text", "text": prompt}]
        for uri in media:
            content.append({"type": "input_image", "image_url": uri, "detail": "auto"})
        return [{"role": "user", "content": content}]

    async def _generate(self, template_name: str, instructions: str, prompt: str, media: Sequence[str]) -> str:
        agent = self._build_agent(template_name, instructions)
        logger.info(f"Sending {template_name} to agent")
        result = await Runner.run(agent, self._build_input(prompt, media))
        logger.info("Received response from agent")
        return str(result.final_output)


class GeminiBackend(GenerationBackend):
    """Backend calling Google Gemini through google-generativeai."""

    provider = "gemini"

    def __init__(self, model_config: Optional[Dict[str, Any]] = None):
        super().__init__(model_config)
        api_key = os.getenv("GOOGLE_API_KEY")
        if not api_key:
            logger.warning("GOOGLE_API_KEY not found in environment variables")
        genai.configure(api_key=api_key)

    async def _generate(self, template_name: str, instructions: str, prompt: str, media: Sequence[str]) -> str:
        model = genai.GenerativeModel(
            model_name=self.model,
            system_instruction=instructions,
            generation_config={
                "temperature": self.model_config.get("temperature"),
                "max_output_tokens": self.model_config.get("max_tokens"),
                "response_mime_type": "application/json",
            }
        )

        parts: List[Any] = [prompt]
        for uri in media:
            mime_type, data = decode_data_uri(uri)
            parts.append({"mime_type": mime_type, "data": data})

        logger.info(f"Sending {template_name} to Gemini model {self.model}")
        response = await asyncio.to_thread(model.generate_content, parts)
        return response.text


BACKENDS = {
    AgentsBackend.provider: AgentsBackend,
    GeminiBackend.provider: GeminiBackend,
}


def get_backend(name: Optional[str] = None) -> GenerationBackend:
    """Instantiate the configured generation backend."""
    name = (name or get_backend_name()).lower()
    if name not in BACKENDS:
        raise ValueError(f"Unknown generation backend: {name}")
    logger.info(f"Using {name} generation backend")
    return BACKENDS[name]()
