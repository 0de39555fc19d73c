"""Google Gemini client for schema-constrained generation."""

import json
from dataclasses import dataclass

from google import genai
from google.genai import types

from diet_genius.domain.analysis import ImagePayload
from diet_genius.services.generation import StructuredGenerationClient


@dataclass
class GeminiStructuredClient(StructuredGenerationClient):
    """Structured generation client backed by the Gemini API."""

    client: genai.Client
    model: str

    @classmethod
    def create(cls, api_key: str, model: str) -> "GeminiStructuredClient":
        """Create a Gemini structured generation client."""
        return cls(client=genai.Client(api_key=api_key), model=model)

    async def generate_json(
        self,
        *,
        prompt: str,
        schema: dict[str, object],
        schema_name: str,
        image: ImagePayload | None = None,
    ) -> dict[str, object]:
        """Call Gemini with a JSON response schema and parse the reply."""
        contents: list[types.Part] = []
        if image is not None:
            contents.append(
                types.Part.from_bytes(data=image.data, mime_type=image.mime_type)
            )
        contents.append(types.Part.from_text(text=prompt))

        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=contents,
            config=types.GenerateContentConfig(
                response_mime_type="application/json",
                response_json_schema=schema,
            ),
        )
        output_text = (response.text or "").strip()
        if not output_text:
            raise RuntimeError(f"Gemini returned an empty {schema_name} response")
        return json.loads(output_text)

    async def close(self) -> None:
        """Close the underlying async HTTP session."""
        await self.client.aio.aclose()
