"""
Resume bullet generation.

Sends a free-text description to the Gemini generateContent REST API and
returns whatever text comes back. The text is treated as opaque display text.
"""
import asyncio
import logging
from typing import Any, Dict, Optional

import aiohttp

from jobtracker.config import settings
from jobtracker.errors import BulletGenerationError, ValidationError

logger = logging.getLogger(__name__)

GEMINI_BASE = "https://generativelanguage.googleapis.com/v1beta/models"

PROMPT_TEMPLATE = """You are a professional resume writer. Generate 3-5 achievement-focused resume bullet points based on this experience:

"{description}"

Requirements:
- Start each bullet with a strong action verb (Developed, Implemented, Built, etc.)
- Include specific metrics or quantifiable results when possible
- Keep each bullet to 1-2 lines
- Focus on impact and achievements, not just responsibilities
- Use professional language

Return ONLY the bullet points in this exact format:
- First bullet here
- Second bullet here
- Third bullet here

Use a newline character between each bullet point."""


def build_prompt(description: str) -> str:
    """Build the resume-writer prompt for a description."""
    return PROMPT_TEMPLATE.format(description=description.strip())


def extract_text(payload: Dict[str, Any]) -> str:
    """
    Pull the generated text out of a generateContent response body.

    Raises:
        BulletGenerationError: If the response has no text candidates
    """
    candidates = payload.get("candidates") or []
    if not candidates:
        feedback = payload.get("promptFeedback", {})
        raise BulletGenerationError(
            f"No candidates returned (block reason: {feedback.get('blockReason', 'unknown')})"
        )

    parts = (candidates[0].get("content") or {}).get("parts") or []
    text = "".join(part.get("text", "") for part in parts).strip()
    if not text:
        raise BulletGenerationError("Empty response from text generation service")
    return text


class BulletGenerator:
    """Client for the hosted text-completion model."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        timeout_s: Optional[int] = None
    ):
        self.api_key = api_key if api_key is not None else settings.gemini_api_key
        self.model = model or settings.gemini_model
        self.timeout_s = timeout_s or settings.gemini_timeout_seconds

    @property
    def url(self) -> str:
        return f"{GEMINI_BASE}/{self.model}:generateContent"

    async def generate(self, description: Optional[str]) -> str:
        """
        Generate resume bullets for a description.

        Raises:
            ValidationError: If description is missing or blank
            BulletGenerationError: If the API key is missing or the call fails
        """
        if not description or not description.strip():
            raise ValidationError("description", "Description is required")

        if not self.api_key:
            logger.error("GEMINI_API_KEY not found")
            raise BulletGenerationError("API key not configured")

        body = {"contents": [{"parts": [{"text": build_prompt(description)}]}]}
        headers = {
            "Content-Type": "application/json",
            "x-goog-api-key": self.api_key,
        }
        timeout = aiohttp.ClientTimeout(total=self.timeout_s)

        logger.info(f"Calling text generation model {self.model}")
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(self.url, json=body, headers=headers) as resp:
                    if resp.status != 200:
                        error_text = await resp.text(errors="ignore")
                        logger.error(
                            f"Text generation failed: HTTP {resp.status} {error_text[:200]}"
                        )
                        raise BulletGenerationError(
                            f"Text generation service returned HTTP {resp.status}"
                        )
                    payload = await resp.json()
        except aiohttp.ClientError as e:
            logger.error(f"Text generation request failed: {str(e)}", exc_info=True)
            raise BulletGenerationError("Failed to reach text generation service") from e
        except asyncio.TimeoutError as e:
            logger.error("Text generation request timed out")
            raise BulletGenerationError("Text generation service timed out") from e

        bullets = extract_text(payload)
        logger.info("Successfully generated bullets")
        return bullets


def get_bullet_generator() -> BulletGenerator:
    """FastAPI dependency returning a generator built from settings."""
    return BulletGenerator()
