"""
Tests for resume bullet generation.

The hosted model is never called: the endpoint tests swap in a fake
generator through FastAPI dependency overrides.
"""
import pytest
from httpx import AsyncClient

from jobtracker.errors import BulletGenerationError, ValidationError
from jobtracker.main import app
from jobtracker.services.bullets import (
    BulletGenerator,
    build_prompt,
    extract_text,
    get_bullet_generator,
)


class FakeGenerator:
    def __init__(self, bullets: str = None, error: Exception = None):
        self.bullets = bullets
        self.error = error
        self.descriptions = []

    async def generate(self, description):
        self.descriptions.append(description)
        if self.error:
            raise self.error
        return self.bullets


@pytest.fixture
def fake_generator():
    generator = FakeGenerator(bullets="- Built a tracker\n- Shipped analytics")
    app.dependency_overrides[get_bullet_generator] = lambda: generator
    try:
        yield generator
    finally:
        app.dependency_overrides.pop(get_bullet_generator, None)


# =============================================================================
# Prompt and response parsing
# =============================================================================

def test_build_prompt_embeds_description():
    prompt = build_prompt("  Built a job tracker with FastAPI  ")

    assert '"Built a job tracker with FastAPI"' in prompt
    assert "3-5 achievement-focused resume bullet points" in prompt
    assert "- First bullet here" in prompt


def test_extract_text_joins_parts():
    payload = {
        "candidates": [
            {"content": {"parts": [{"text": "- Led migration\n"}, {"text": "- Cut costs 20%"}]}}
        ]
    }

    assert extract_text(payload) == "- Led migration\n- Cut costs 20%"


def test_extract_text_no_candidates():
    with pytest.raises(BulletGenerationError) as exc_info:
        extract_text({"promptFeedback": {"blockReason": "SAFETY"}})

    assert "SAFETY" in str(exc_info.value)


def test_extract_text_empty_parts():
    with pytest.raises(BulletGenerationError):
        extract_text({"candidates": [{"content": {"parts": []}}]})


# =============================================================================
# Generator guards (no network)
# =============================================================================

@pytest.mark.asyncio
@pytest.mark.parametrize("description", [None, "", "   "])
async def test_generate_requires_description(description):
    generator = BulletGenerator(api_key="key")

    with pytest.raises(ValidationError):
        await generator.generate(description)


@pytest.mark.asyncio
async def test_generate_requires_api_key():
    generator = BulletGenerator(api_key="")

    with pytest.raises(BulletGenerationError) as exc_info:
        await generator.generate("Built things")

    assert str(exc_info.value) == "API key not configured"


def test_generator_url_uses_model():
    generator = BulletGenerator(api_key="key", model="gemini-2.5-flash")

    assert generator.url.endswith("/models/gemini-2.5-flash:generateContent")


# =============================================================================
# Endpoint
# =============================================================================

@pytest.mark.asyncio
async def test_generate_bullets_endpoint(client: AsyncClient, fake_generator):
    response = await client.post(
        "/api/generate-bullets",
        json={"description": "Built a job tracker"}
    )

    assert response.status_code == 200
    assert response.json() == {"bullets": "- Built a tracker\n- Shipped analytics"}
    assert fake_generator.descriptions == ["Built a job tracker"]


@pytest.mark.asyncio
async def test_generate_bullets_missing_description(client: AsyncClient):
    # Real generator: validation happens before any network call
    response = await client.post("/api/generate-bullets", json={})

    assert response.status_code == 400
    assert response.json()["detail"] == "Description is required"


@pytest.mark.asyncio
async def test_generate_bullets_failure_returns_500(client: AsyncClient, fake_generator):
    fake_generator.error = BulletGenerationError("Text generation service returned HTTP 503")

    response = await client.post(
        "/api/generate-bullets",
        json={"description": "Built a job tracker"}
    )

    assert response.status_code == 500
    assert "503" in response.json()["detail"]
