# ==============================================
# GeminiClassifier
# ==============================================
#
# PURPOSE:
#   Thin wrapper over google-generativeai that sends one prompt with
#   a fixed system instruction and returns the decoded JSON object.
#   Structured output is requested through response_mime_type and
#   response_schema; validation of the object itself happens in
#   PatternInferenceResult.from_dict().
#
# FUNCTIONS:
# ----------
# - create_classifier(config, system_instruction) -> GeminiClassifier
#     Raises ValueError for providers other than "gemini".
#
# ==============================================

import json
import os
from typing import Any, Dict, Optional

import google.generativeai as genai

from rule_inference.config import InferenceConfig

RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "pattern": {"type": "STRING", "nullable": True},
        "format": {"type": "STRING"},
        "description": {"type": "STRING"},
    },
    "required": ["pattern", "description"],
}


class GeminiClassifier:
    """Calls a Gemini model and returns its JSON answer as a dict."""

    def __init__(self, model_name: str, system_instruction: str, api_key: Optional[str] = None):
        self.model_name = model_name
        self.api_key = api_key or os.getenv("GOOGLE_API_KEY")
        self._generation_config = {
            "temperature": 0.0,
            "response_mime_type": "application/json",
            "response_schema": RESPONSE_SCHEMA,
        }
        if self.api_key:
            genai.configure(api_key=self.api_key)
        self.client = genai.GenerativeModel(
            model_name=model_name,
            system_instruction=system_instruction,
            generation_config=self._generation_config,
        )

    def classify(self, prompt: str) -> Dict[str, Any]:
        response = self.client.generate_content(prompt)
        # response.text raises ValueError when the candidate was blocked
        return json.loads(response.text)


def create_classifier(config: InferenceConfig, system_instruction: str) -> GeminiClassifier:
    if config.ai_provider != "gemini":
        raise ValueError(f"Unsupported AI provider '{config.ai_provider}'")
    return GeminiClassifier(
        model_name=config.ai_model,
        system_instruction=system_instruction,
        api_key=config.api_key,
    )
