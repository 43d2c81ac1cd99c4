"""
Structured logging for calls made to generation backends.
"""
import json
import logging
from datetime import datetime
from typing import Dict, Any, Optional

logger = logging.getLogger(__name__)


def log_api_call(
    provider: str,
    model: str,
    prompt_length: int,
    response_length: int,
    duration: float,
    status: str,
    error: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """Log a single backend call and return the logged entry.

    Args:
        provider: Backend provider name (openai, gemini)
        model: Model name used for the call
        prompt_length: Length of the prompt in characters
        response_length: Length of the raw response in characters
        duration: Wall-clock duration in seconds
        status: "success" or "error"
        error: Error message when the call failed
        metadata: Extra call parameters (template, temperature, ...)

    Returns:
        The log entry as a dictionary
    """
    entry = {
        "timestamp": datetime.now().isoformat(),
        "provider": provider,
        "model": model,
        "prompt_length": prompt_length,
        "response_length": response_length,
        "duration_seconds": round(duration, 3),
        "status": status,
        "error": error,
        "metadata": metadata or {},
    }

    if status == "success":
        logger.info(f"API call: {json.dumps(entry, default=str)}")
    else:
        logger.error(f"API call failed: {json.dumps(entry, default=str)}")
    return entry
