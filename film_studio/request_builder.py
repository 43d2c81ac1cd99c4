"""
Turns raw form input into validated, immutable request objects.

Nothing here raises across the module boundary: every builder returns a
``Result`` holding either the request or a field-level error map.
"""
import logging
from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError as SchemaError

from .base_config import ACCEPTED_IMAGE_TYPES, MAX_FILE_SIZE, MIN_TEXT_LENGTH
from .data_uri import file_to_data_uri
from .errors import ReadError
from .schemas import ModelRequest, Result, StoryboardRequest

logger = logging.getLogger(__name__)

FORM_FIELDS = {
    "script_outline": "scriptOutline",
    "concept_art_data_uri": "conceptArt",
    "conceptArtDataUri": "conceptArt",
    "model_description": "modelDescription",
}

FIELD_LABELS = {
    "scriptOutline": "Script outline",
    "modelDescription": "Model description",
}


def _as_file_list(files: Any) -> List[Any]:
    """Normalize a file input value (None, a single upload, or a sequence)."""
    if files is None:
        return []
    if isinstance(files, (list, tuple)):
        return list(files)
    return [files]


def validate_text_field(name: str, value: Optional[str]) -> Optional[str]:
    """Return an error message for a too-short text field, or None."""
    if len((value or "").strip()) < MIN_TEXT_LENGTH:
        label = FIELD_LABELS.get(name, name)
        return f"{label} must be at least {MIN_TEXT_LENGTH} characters."
    return None


def validate_concept_art(files: Any) -> Optional[str]:
    """Check the concept art selection: exactly one file, size and type."""
    files = _as_file_list(files)
    if not files:
        return "Concept art is required."
    if len(files) > 1:
        return "Only one concept art image may be uploaded."

    upload = files[0]
    size = getattr(upload, "size", None)
    if size is None or size > MAX_FILE_SIZE:
        return "Max file size is 5MB."
    if getattr(upload, "type", None) not in ACCEPTED_IMAGE_TYPES:
        return ".jpg, .jpeg, .png and .webp files are accepted."
    return None


def validate_storyboard_form(form: Mapping[str, Any]) -> Dict[str, str]:
    errors = {}
    message = validate_text_field("scriptOutline", form.get("scriptOutline"))
    if message:
        errors["scriptOutline"] = message
    return errors


def validate_model_form(form: Mapping[str, Any]) -> Dict[str, str]:
    errors = {}
    message = validate_concept_art(form.get("conceptArt"))
    if message:
        errors["conceptArt"] = message
    message = validate_text_field("modelDescription", form.get("modelDescription"))
    if message:
        errors["modelDescription"] = message
    return errors


def _schema_errors(error: SchemaError) -> Dict[str, str]:
    """Key schema errors by form field, keeping the validator's own message."""
    field_errors = {}
    for item in error.errors():
        location = str((item.get("loc") or ("form",))[0])
        cause = (item.get("ctx") or {}).get("error")
        message = str(cause) if cause is not None else item.get("msg", "Invalid value")
        field_errors.setdefault(FORM_FIELDS.get(location, location), message)
    return field_errors


def build_storyboard_request(form: Mapping[str, Any]) -> Result[StoryboardRequest]:
    """Build a StoryboardRequest from raw form state.

    Args:
        form: Mapping with a ``scriptOutline`` string

    Returns:
        Result with the request, or with one error per offending field
    """
    errors = validate_storyboard_form(form)
    if errors:
        logger.info(f"Storyboard form rejected: {errors}")
        return Result.invalid(errors)

    try:
        request = StoryboardRequest(script_outline=form["scriptOutline"])
    except SchemaError as e:
        return Result.invalid(_schema_errors(e))
    return Result.ok(request)


async def build_model_request(form: Mapping[str, Any]) -> Result[ModelRequest]:
    """Build a ModelRequest from raw form state.

    The selected file is validated, then read and encoded as a data URI.
    A failed read yields a failed Result carrying the read error message.

    Args:
        form: Mapping with ``conceptArt`` (one upload or a sequence of
            uploads) and ``modelDescription``

    Returns:
        Result with the request, field errors, or a read error
    """
    errors = validate_model_form(form)
    if errors:
        logger.info(f"Model form rejected: {errors}")
        return Result.invalid(errors)

    upload = _as_file_list(form.get("conceptArt"))[0]
    try:
        concept_art_data_uri = await file_to_data_uri(upload)
    except ReadError as e:
        return Result.failed(str(e))

    try:
        request = ModelRequest(
            concept_art_data_uri=concept_art_data_uri,
            model_description=form["modelDescription"],
        )
    except SchemaError as e:
        return Result.invalid(_schema_errors(e))
    return Result.ok(request)
