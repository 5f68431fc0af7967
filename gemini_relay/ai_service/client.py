"""
Gemini inference client adapter.
Selects a model per modality and submits plain or multimodal prompts.
"""

import logging
from typing import Dict, Optional

from google import genai
from google.genai import types

from gemini_relay.ai_service.config import MODALITIES, Settings

logger = logging.getLogger(__name__)


class GeminiClient:
    """
    Thin wrapper around google.genai.Client.

    The SDK client is created on first use, so a missing API key is reported
    by the first call instead of at startup.
    """

    def __init__(self, api_key: Optional[str], models: Dict[str, str], sdk_client: Optional[genai.Client] = None):
        missing = [m for m in MODALITIES if not models.get(m)]
        if missing:
            raise ValueError(f"No model configured for: {', '.join(missing)}")

        self._api_key = api_key
        self._models = dict(models)
        self._sdk_client = sdk_client

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiClient":
        logger.info("Gemini client configured with models: %s", settings.models)
        return cls(api_key=settings.api_key, models=settings.models)

    @property
    def sdk(self) -> genai.Client:
        if self._sdk_client is None:
            self._sdk_client = genai.Client(api_key=self._api_key)
        return self._sdk_client

    def model_for(self, modality: str) -> str:
        """
        Return the model identifier configured for a modality.

        Raises:
            ValueError: If the modality is not one of text, image, audio, pdf.
        """
        try:
            return self._models[modality]
        except KeyError:
            raise ValueError(f"Unknown modality: {modality!r}") from None

    def generate_text(self, modality: str, prompt: str) -> types.GenerateContentResponse:
        """
        Send a plain string prompt.

        Args:
            modality (str): Selects the model.
            prompt (str): The full prompt text.

        Returns:
            GenerateContentResponse: The raw SDK result.
        """
        model = self.model_for(modality)
        return self.sdk.models.generate_content(model=model, contents=prompt)

    def generate_with_file(self, modality: str, instruction: str, data: bytes, mime_type: str) -> types.GenerateContentResponse:
        """
        Send an instruction followed by inline binary data.

        The SDK base64-encodes the bytes on the wire.

        Args:
            modality (str): Selects the model.
            instruction (str): Text part placed before the file.
            data (bytes): Raw file content.
            mime_type (str): MIME type reported for the upload.

        Returns:
            GenerateContentResponse: The raw SDK result.
        """
        model = self.model_for(modality)
        contents = types.Content(
            role="user",
            parts=[
                types.Part.from_text(text=instruction),
                types.Part.from_bytes(data=data, mime_type=mime_type),
            ],
        )
        return self.sdk.models.generate_content(model=model, contents=contents)
