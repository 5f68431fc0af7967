"""
Environment-driven settings for the relay.
Reads the Gemini credential, the per-modality model map, and server options.
"""

import os
from dataclasses import dataclass, field
from typing import Dict, Optional

from dotenv import load_dotenv

# Load .env variables from the project root
load_dotenv()

# --- MODALITIES ---
TEXT = "text"
IMAGE = "image"
AUDIO = "audio"
PDF = "pdf"
MODALITIES = (TEXT, IMAGE, AUDIO, PDF)

DEFAULT_MODEL = "gemini-2.5-flash"


def _default_models() -> Dict[str, str]:
    return {modality: DEFAULT_MODEL for modality in MODALITIES}


@dataclass(frozen=True)
class Settings:
    """
    Process-wide configuration, read once at startup.

    Attributes:
        api_key (str): Gemini API key, or None if unset.
        models (dict): Model identifier per modality.
        host (str): Bind address for the development server.
        port (int): Listen port.
        log_level (str): Root logging level name.
        debug (bool): Flask debug mode.
    """
    api_key: Optional[str] = None
    models: Dict[str, str] = field(default_factory=_default_models)
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    debug: bool = False


def load_settings() -> Settings:
    """
    Build Settings from the current environment.

    The API key is not validated here; a missing key surfaces on the first
    inference call.

    Returns:
        Settings: The resolved configuration.
    """
    models = {
        modality: os.getenv(f"GEMINI_{modality.upper()}_MODEL") or DEFAULT_MODEL
        for modality in MODALITIES
    }

    return Settings(
        api_key=os.getenv("GEMINI_API_KEY"),
        models=models,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", 3000)),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        debug=os.getenv("FLASK_DEBUG", "").lower() in ("1", "true", "yes"),
    )
