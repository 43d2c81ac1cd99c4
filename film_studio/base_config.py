from typing import Dict, Any
import os
from dotenv import load_dotenv

load_dotenv()

# Generation backend: "openai" (Agents SDK) or "gemini"
DEFAULT_BACKEND = "openai"

# Base configuration for all agents
BASE_MODEL_CONFIG = {
    "model": "gpt-4.1-mini",
    "temperature": 0.7,
    "max_tokens": 2000,
}

GEMINI_MODEL_CONFIG = {
    "model": "gemini-2.0-flash",
    "temperature": 0.7,
    "max_tokens": 8000,
}

# Request limits enforced before anything reaches a backend
MIN_TEXT_LENGTH = 10
MAX_FILE_SIZE = 5 * 1024 * 1024  # 5MB
ACCEPTED_IMAGE_TYPES = ["image/jpeg", "image/jpg", "image/png", "image/webp"]
ACCEPTED_IMAGE_EXTENSIONS = ["jpg", "jpeg", "png", "webp"]

# 3D model generation is not backed by a real service yet
MODEL_GENERATION_MODES = ("placeholder", "backend")
DEFAULT_MODEL_GENERATION_DELAY = 1.5


def get_backend_name() -> str:
    """Get the configured generation backend name."""
    return os.getenv("STUDIO_BACKEND", DEFAULT_BACKEND).strip().lower()


def get_model_config(backend: str = None) -> Dict[str, Any]:
    """Get model configuration for a backend, honoring STUDIO_MODEL."""
    backend = backend or get_backend_name()
    config = GEMINI_MODEL_CONFIG.copy() if backend == "gemini" else BASE_MODEL_CONFIG.copy()
    if os.getenv("STUDIO_MODEL"):
        config["model"] = os.getenv("STUDIO_MODEL")
    return config


def get_model_generation_mode() -> str:
    mode = os.getenv("MODEL_GENERATION_MODE", "placeholder").strip().lower()
    if mode not in MODEL_GENERATION_MODES:
        raise ValueError(f"Unknown MODEL_GENERATION_MODE: {mode}")
    return mode


def get_model_generation_delay() -> float:
    return float(os.getenv("MODEL_GENERATION_DELAY", DEFAULT_MODEL_GENERATION_DELAY))


# Common agent instructions
AGENT_INSTRUCTIONS = {
    "storyboard_artist": """You are a professional storyboard artist.
    Your tasks:
    1. Break a script outline into consecutive scenes
    2. Suggest a camera angle for every scene
    3. Describe the scene layout (blocking, composition, key props)
    4. Answer with JSON only""",

    "modeler": """You are an expert 3D modeler.
    Your tasks:
    1. Study the provided 2D concept art
    2. Produce a 3D model and a matching texture
    3. Return both assets as base64 data URIs
    4. Answer with JSON only""",
}
