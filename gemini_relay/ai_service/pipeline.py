"""
Inference pipelines used by the routes.

Single-stage: one call, one extracted reply.
Two-stage: a multimodal call whose raw text is passed back through the text
model with a cleanup instruction.
"""

import logging

from gemini_relay.ai_service.client import GeminiClient
from gemini_relay.ai_service.config import TEXT
from gemini_relay.ai_service.reply import extract_reply

logger = logging.getLogger(__name__)


def answer_prompt(client: GeminiClient, prompt: str) -> str:
    """Single text call through the text model."""
    return extract_reply(client.generate_text(TEXT, prompt))


def summarize_upload(client: GeminiClient, modality: str, instruction: str, data: bytes, mime_type: str) -> str:
    """Single multimodal call for an uploaded file."""
    result = client.generate_with_file(modality, instruction, data, mime_type)
    return extract_reply(result)


def refine_upload(
    client: GeminiClient,
    modality: str,
    instruction: str,
    cleanup_template: str,
    data: bytes,
    mime_type: str,
) -> str:
    """
    Describe or transcribe an upload, then tidy the result with the text model.

    Args:
        client (GeminiClient): Inference adapter.
        modality (str): Model selector for the first stage (image or audio).
        instruction (str): First-stage instruction sent with the file.
        cleanup_template (str): Second-stage prompt with a `{raw}` placeholder.
        data (bytes): Uploaded file content.
        mime_type (str): Upload MIME type.

    Returns:
        str: The refined reply.
    """
    raw_text = summarize_upload(client, modality, instruction, data, mime_type)
    logger.debug("Stage 1 (%s) produced %d characters", modality, len(raw_text))

    return answer_prompt(client, cleanup_template.format(raw=raw_text))
