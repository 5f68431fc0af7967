"""
Relay routes: text, image, audio, and PDF generation.
Each route validates one input, runs a pipeline, and returns {"reply": ...}.
"""

import logging
from typing import Tuple, Dict, Any, Optional

from flask import Blueprint, request, jsonify, Response, current_app
from werkzeug.datastructures import FileStorage

from gemini_relay.ai_service.client import GeminiClient
from gemini_relay.ai_service.config import IMAGE, AUDIO, PDF
from gemini_relay.ai_service.pipeline import answer_prompt, refine_upload, summarize_upload

logger = logging.getLogger(__name__)

relay_bp = Blueprint("relay", __name__)

CLIENT_EXTENSION_KEY = "gemini_client"

# --- PROMPTS ---
TEXT_SUFFIX = "\n\nAnswer briefly, clearly, and neatly."

IMAGE_INSTRUCTION = "Analyze this image and describe its contents briefly."
IMAGE_CLEANUP = "Tidy up the following description so it is clear, neat, and easy to read:\n\n{raw}"

AUDIO_INSTRUCTION = "Transcribe this audio into Indonesian-language text."
AUDIO_CLEANUP = "Tidy up the following transcript so it is clear and neat, with correct punctuation:\n\n{raw}"

PDF_INSTRUCTION = "Summarize the contents of this PDF document so it is clear, neat, and easy to understand."

# --- MESSAGES ---
INVALID_MESSAGE = "Message is missing or not in the correct format."
MISSING_FILE = "No file was uploaded."
GENERIC_ERROR = "An error occurred"


def get_client() -> GeminiClient:
    """Return the inference client injected by create_app()."""
    return current_app.extensions[CLIENT_EXTENSION_KEY]


def get_upload() -> Optional[FileStorage]:
    """Return the uploaded `file` field, or None if nothing was sent."""
    upload = request.files.get("file")
    if upload is None or not upload.filename:
        return None
    return upload


def error_response(err: Exception) -> Tuple[Response, int]:
    """Log a failure and turn it into the uniform 500 body."""
    logger.exception("Request to %s failed", request.path)
    detail = str(err) or err.__class__.__name__
    return jsonify({"message": GENERIC_ERROR, "error": detail}), 500


# --- ROUTES ---

@relay_bp.route("/generate-text", methods=["POST"])
def generate_text() -> Tuple[Response, int]:
    """
    Answer a text prompt.

    Expects JSON: {"message": "..."}

    Returns:
        200: {"reply": str}
        400: Missing or non-string message.
        500: Inference error.
    """
    data: Dict[str, Any] = request.get_json(silent=True) or {}
    message = data.get("message") if isinstance(data, dict) else None

    if not message or not isinstance(message, str):
        return jsonify({"message": INVALID_MESSAGE}), 400

    try:
        reply = answer_prompt(get_client(), f"{message}{TEXT_SUFFIX}")
        return jsonify({"reply": reply}), 200
    except Exception as e:
        return error_response(e)


@relay_bp.route("/generate-image", methods=["POST"])
def generate_image() -> Tuple[Response, int]:
    """
    Describe an uploaded image, then tidy the description.

    Expects multipart field `file`.
    """
    upload = get_upload()
    if upload is None:
        return jsonify({"message": MISSING_FILE}), 400

    try:
        reply = refine_upload(
            get_client(), IMAGE, IMAGE_INSTRUCTION, IMAGE_CLEANUP,
            upload.read(), upload.mimetype,
        )
        return jsonify({"reply": reply}), 200
    except Exception as e:
        return error_response(e)


@relay_bp.route("/generate-audio", methods=["POST"])
def generate_audio() -> Tuple[Response, int]:
    """
    Transcribe an uploaded audio file, then fix its punctuation.

    Expects multipart field `file`.
    """
    upload = get_upload()
    if upload is None:
        return jsonify({"message": MISSING_FILE}), 400

    try:
        reply = refine_upload(
            get_client(), AUDIO, AUDIO_INSTRUCTION, AUDIO_CLEANUP,
            upload.read(), upload.mimetype,
        )
        return jsonify({"reply": reply}), 200
    except Exception as e:
        return error_response(e)


@relay_bp.route("/generate-pdf", methods=["POST"])
def generate_pdf() -> Tuple[Response, int]:
    """
    Summarize an uploaded PDF.

    Expects multipart field `file`. The MIME type is passed through as sent
    (normally application/pdf) and is not checked.
    """
    upload = get_upload()
    if upload is None:
        return jsonify({"message": MISSING_FILE}), 400

    try:
        reply = summarize_upload(get_client(), PDF, PDF_INSTRUCTION, upload.read(), upload.mimetype)
        return jsonify({"reply": reply}), 200
    except Exception as e:
        return error_response(e)
