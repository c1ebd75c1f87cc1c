import json
import re
import asyncio
import logging
from typing import Optional, Type, TypeVar

from google import genai
from google.genai import types
from pydantic import BaseModel, ValidationError

from app.config import Settings

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class GenerationError(Exception):
    """Raised for any failed model call: transport, quota, empty or malformed output."""


def clean_gemini_output(text: str) -> str:
    """Removes markdown-style ```json and ``` from Gemini output."""
    text = re.sub(r"^```(?:json)?\s*", "", text.strip())
    text = re.sub(r"\s*```$", "", text.strip())
    return text.strip()


def parse_json_object(text: str) -> dict:
    """
    Parses the model reply as a JSON object. Falls back to the outermost
    ``{...}`` block when the model wrapped the JSON in prose.
    """
    text = clean_gemini_output(text)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        logger.warning("JSONDecodeError in Gemini reply: %s", e)
        start, end = text.find("{"), text.rfind("}")
        if start == -1 or end <= start:
            raise GenerationError("Gemini returned invalid JSON.") from e
        try:
            data = json.loads(text[start : end + 1])
        except json.JSONDecodeError as inner_err:
            raise GenerationError("Gemini returned invalid JSON.") from inner_err

    if not isinstance(data, dict):
        raise GenerationError("Expected a JSON object.")
    return data


class GeminiService:
    """
    Thin async wrapper over the blocking ``google.genai`` client.

    ``generate`` sends a prompt and validates the reply against an output
    model; ``synthesize_speech`` returns raw PCM audio for a narration text.
    """

    def __init__(self, client, settings: Settings):
        self.client = client
        self.settings = settings

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiService":
        if not settings.gemini_api_key:
            raise GenerationError("GEMINI_API_KEY not set.")
        client = genai.Client(api_key=settings.gemini_api_key)
        logger.info("✅ Gemini client initialized (model=%s).", settings.text_model)
        return cls(client, settings)

    async def generate(self, prompt: str, output_model: Type[T]) -> T:
        logger.debug("🧠 Gemini prompt for %s:\n%s", output_model.__name__, prompt)
        try:
            response = await asyncio.to_thread(
                self.client.models.generate_content,
                model=self.settings.text_model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    response_mime_type="application/json",
                ),
            )
        except Exception as e:
            logger.exception("❌ Gemini call failed for %s", output_model.__name__)
            raise GenerationError(f"Gemini error: {e}") from e

        text = response.text or ""
        logger.debug("📄 Gemini response:\n%s", text)
        if not text.strip():
            raise GenerationError("Gemini returned an empty response.")

        data = parse_json_object(text)
        try:
            return output_model.model_validate(data)
        except ValidationError as e:
            logger.error("❌ Gemini output does not match %s: %s", output_model.__name__, e)
            raise GenerationError(
                f"Gemini output does not match {output_model.__name__}."
            ) from e

    async def synthesize_speech(self, text: str) -> Optional[bytes]:
        """Returns raw PCM for ``text``, or ``None`` when the reply carries no audio."""
        config = types.GenerateContentConfig(
            response_modalities=["AUDIO"],
            speech_config=types.SpeechConfig(
                voice_config=types.VoiceConfig(
                    prebuilt_voice_config=types.PrebuiltVoiceConfig(
                        voice_name=self.settings.tts_voice,
                    )
                )
            ),
        )
        try:
            response = await asyncio.to_thread(
                self.client.models.generate_content,
                model=self.settings.tts_model,
                contents=text,
                config=config,
            )
        except Exception as e:
            logger.exception("❌ Gemini speech synthesis failed")
            raise GenerationError(f"Gemini speech error: {e}") from e

        audio = _first_inline_data(response)
        if not audio:
            logger.warning("⚠️ Gemini speech reply contained no audio")
        return audio


def _first_inline_data(response) -> Optional[bytes]:
    for candidate in response.candidates or []:
        content = candidate.content
        for part in (content.parts if content else None) or []:
            if part.inline_data and part.inline_data.data:
                return part.inline_data.data
    return None
