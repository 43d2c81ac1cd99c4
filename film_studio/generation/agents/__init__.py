"""
Generation Agents

Prompt templates, backend adapters and response parsing for generation calls.
"""

from film_studio.generation.agents.backends import AgentsBackend, GeminiBackend, GenerationBackend, get_backend
from film_studio.generation.agents.prompt_templates import MODEL_TEMPLATE, STORYBOARD_TEMPLATE, PromptTemplate

__all__ = [
    'AgentsBackend',
    'GeminiBackend',
    'GenerationBackend',
    'get_backend',
    'MODEL_TEMPLATE',
    'STORYBOARD_TEMPLATE',
    'PromptTemplate',
]
