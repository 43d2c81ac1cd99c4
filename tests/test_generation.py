import asyncio
import json

import pytest

from film_studio.data_uri import decode_data_uri, encode_data_uri
from film_studio.errors import GenerationFailure, SchemaValidationError
from film_studio.generation import GenerationCoordinator
from film_studio.generation.agents.prompt_templates import MODEL_TEMPLATE, STORYBOARD_TEMPLATE
from film_studio.generation.agents.response_parser import clean_json_response, parse_response
from film_studio.schemas import ModelRequest, StoryboardRequest, StoryboardResponse

from conftest import FakeBackend

OUTLINE = "A detective enters a dark warehouse."


def _model_request():
    return ModelRequest(
        concept_art_data_uri=encode_data_uri(b"\xff\xd8\xff", "image/jpeg"),
        model_description="A futuristic helmet with glowing blue accents",
    )


def test_storyboard_is_generated_with_one_backend_call(storyboard_json):
    backend = FakeBackend([storyboard_json])
    coordinator = GenerationCoordinator(backend=backend, model_mode="placeholder")

    response = asyncio.run(coordinator.generate_storyboard(StoryboardRequest(script_outline=OUTLINE)))

    assert len(response.storyboard) == 2
    assert response.storyboard[0].camera_angle == "Low angle from inside the warehouse"
    assert len(backend.calls) == 1
    call = backend.calls[0]
    assert call["template_name"] == "generateStoryboardPrompt"
    assert OUTLINE in call["prompt"]
    assert call["media"] == []


def test_fenced_json_is_accepted(storyboard_json):
    backend = FakeBackend([f"Here you go:\n```json\n{storyboard_json}\n```"])
    coordinator = GenerationCoordinator(backend=backend, model_mode="placeholder")

    response = asyncio.run(coordinator.generate_storyboard(StoryboardRequest(script_outline=OUTLINE)))

    assert len(response.storyboard) == 2


def test_missing_field_is_a_schema_failure():
    raw = json.dumps({"storyboard": [{"sceneDescription": "Warehouse", "sceneLayout": "Wide"}]})
    coordinator = GenerationCoordinator(backend=FakeBackend([raw]), model_mode="placeholder")

    with pytest.raises(SchemaValidationError) as exc_info:
        asyncio.run(coordinator.generate_storyboard(StoryboardRequest(script_outline=OUTLINE)))

    assert isinstance(exc_info.value, GenerationFailure)
    assert exc_info.value.template_name == "generateStoryboardPrompt"
    assert exc_info.value.raw_response == raw


def test_non_json_output_is_a_schema_failure():
    coordinator = GenerationCoordinator(backend=FakeBackend(["I cannot do that."]), model_mode="placeholder")

    with pytest.raises(SchemaValidationError):
        asyncio.run(coordinator.generate_storyboard(StoryboardRequest(script_outline=OUTLINE)))


def test_backend_error_is_a_generation_failure():
    backend = FakeBackend(error=ConnectionError("network down"))
    coordinator = GenerationCoordinator(backend=backend, model_mode="placeholder")

    with pytest.raises(GenerationFailure) as exc_info:
        asyncio.run(coordinator.generate_storyboard(StoryboardRequest(script_outline=OUTLINE)))

    assert not isinstance(exc_info.value, SchemaValidationError)
    assert "network down" in str(exc_info.value)
    assert len(backend.calls) == 1


def test_placeholder_model_skips_backend():
    backend = FakeBackend(["{}"])
    coordinator = GenerationCoordinator(backend=backend, model_mode="placeholder", placeholder_delay=0)

    response = asyncio.run(coordinator.generate_3d_model(_model_request()))

    assert backend.calls == []
    model_mime, model_data = decode_data_uri(response.model_data_uri)
    texture_mime, texture_data = decode_data_uri(response.texture_data_uri)
    assert model_mime == "model/gltf-binary"
    assert model_data[:4] == b"glTF"
    assert texture_mime == "image/png"
    assert texture_data.startswith(b"\x89PNG\r\n\x1a\n")


def test_backend_model_mode_sends_concept_art():
    request = _model_request()
    raw = json.dumps({
        "modelDataUri": encode_data_uri(b"glTF-model", "model/gltf-binary"),
        "textureDataUri": encode_data_uri(b"png-texture", "image/png"),
    })
    backend = FakeBackend([raw])
    coordinator = GenerationCoordinator(backend=backend, model_mode="backend")

    response = asyncio.run(coordinator.generate_3d_model(request))

    assert decode_data_uri(response.texture_data_uri) == ("image/png", b"png-texture")
    assert len(backend.calls) == 1
    assert backend.calls[0]["template_name"] == "generate3DModelPrompt"
    assert backend.calls[0]["media"] == [request.concept_art_data_uri]
    assert request.model_description in backend.calls[0]["prompt"]


def test_model_response_requires_data_uris():
    raw = json.dumps({"modelDataUri": "https://example.com/model.glb", "textureDataUri": "nope"})
    coordinator = GenerationCoordinator(backend=FakeBackend([raw]), model_mode="backend")

    with pytest.raises(SchemaValidationError):
        asyncio.run(coordinator.generate_3d_model(_model_request()))


def test_templates_interpolate_fields_verbatim():
    outline = "INT. LAB - {night} a robot wakes"
    prompt = STORYBOARD_TEMPLATE.render(script_outline=outline)

    assert outline in prompt
    assert '"storyboard": [' in prompt
    assert MODEL_TEMPLATE.render(model_description="Brass robot").count("Brass robot") == 1


def test_clean_json_response():
    assert clean_json_response('  {"a": 1}  ') == '{"a": 1}'
    assert clean_json_response('```json\n{"a": 1}\n```') == '{"a": 1}'
    assert clean_json_response('```\n{"a": 1}\n```') == '{"a": 1}'


def test_parse_response_returns_result(storyboard_json):
    ok = parse_response(storyboard_json, StoryboardResponse)
    bad = parse_response('{"storyboard": "not a list"}', StoryboardResponse)

    assert ok.success and len(ok.value.storyboard) == 2
    assert not bad.success
    assert bad.error.startswith("Schema validation error")
