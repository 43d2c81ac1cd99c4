import json
import logging
import re
from typing import Type, TypeVar

from pydantic import BaseModel, ValidationError

from ...schemas import Result

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

JSON_FENCE_PATTERN = r"```(?:json)?\s*\n([\s\S]*?)\n\s*```"


def clean_json_response(response: str) -> str:
    """Extract JSON content from potential markdown wrapping."""
    matches = re.findall(JSON_FENCE_PATTERN, response or "")
    if matches:
        logger.info("Found JSON content wrapped in code blocks, extracting...")
        return matches[0].strip()
    return (response or "").strip()


def parse_response(response: str, schema: Type[M]) -> Result[M]:
    """Parse raw backend output into ``schema``.

    Args:
        response: Raw text returned by the backend
        schema: Pydantic model describing the expected output

    Returns:
        Result holding the validated model, or the parse/validation error
    """
    cleaned = clean_json_response(response)
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.error(f"Error parsing JSON: {str(e)}")
        return Result.failed(f"JSON parsing error: {str(e)}")

    try:
        return Result.ok(schema.model_validate(data))
    except ValidationError as e:
        logger.error(f"Response does not match {schema.__name__}: {e.error_count()} error(s)")
        return Result.failed(f"Schema validation error: {str(e)}")
