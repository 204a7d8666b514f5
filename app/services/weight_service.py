import base64
import binascii
import json
import logging
import re
from typing import Dict, Optional

import requests

from app.config import settings
from app.models.constant import SCRAP_CATEGORIES

logger = logging.getLogger(__name__)

DEFAULT_ESTIMATE = {"weight": 5.0, "category": "paper", "confidence": 50.0}

DATA_URL_PATTERN = re.compile(r"^data:(?P<media_type>[\w.+-]+/[\w.+-]+);base64,(?P<payload>.*)$", re.DOTALL)

SYSTEM_PROMPT = (
    "You are a scrap weight estimation expert. Analyze the image of scrap material and "
    "estimate the weight in kilograms. Also identify the scrap category (paper, plastic, "
    "metal, or ewaste). Respond ONLY with a JSON object like: "
    '{"weight": 5.2, "category": "metal", "confidence": 85}. '
    "The weight should be realistic (1-50 kg range). The confidence is 0-100 indicating how sure you are."
)

ESTIMATE_TOOL = {
    "type": "function",
    "function": {
        "name": "estimate_scrap",
        "description": "Return estimated weight, category, and confidence for scrap material in an image.",
        "parameters": {
            "type": "object",
            "properties": {
                "weight": {"type": "number", "description": "Estimated weight in kg (1-50)"},
                "category": {"type": "string", "enum": list(SCRAP_CATEGORIES), "description": "Scrap category"},
                "confidence": {"type": "number", "description": "Confidence score 0-100"},
            },
            "required": ["weight", "category", "confidence"],
            "additionalProperties": False,
        },
    },
}

class ImageValidationError(ValueError):
    pass

class AIGatewayError(Exception):
    """Gateway failure carrying the HTTP status the API should answer with."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(message)

def validate_image(image_base64: str) -> None:
    """Check media type and size for data URLs; bare URLs are passed through to the gateway."""
    match = DATA_URL_PATTERN.match(image_base64)
    if not match:
        return

    allowed = [t.strip() for t in settings.ALLOWED_IMAGE_TYPES.split(",")]
    if match.group("media_type").lower() not in allowed:
        raise ImageValidationError("Invalid image type")

    try:
        raw = base64.b64decode(match.group("payload"), validate=False)
    except (binascii.Error, ValueError):
        raise ImageValidationError("Invalid image data")
    if len(raw) > settings.MAX_IMAGE_SIZE:
        raise ImageValidationError("Image too large")

def _clamp(value, low: float, high: float, default: float) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    # NaN and zero fall back to the default
    if number != number or number == 0:
        return default
    return max(low, min(high, number))

def normalize_estimate(arguments: Optional[str]) -> Dict:
    """Turn the model's tool-call arguments into a bounded estimate."""
    if not arguments:
        return dict(DEFAULT_ESTIMATE)
    try:
        parsed = json.loads(arguments)
    except (TypeError, ValueError):
        logger.error("Failed to parse AI tool call arguments")
        return dict(DEFAULT_ESTIMATE)
    if not isinstance(parsed, dict):
        logger.error("AI tool call arguments are not an object")
        return dict(DEFAULT_ESTIMATE)

    category = parsed.get("category")
    return {
        "weight": _clamp(parsed.get("weight"), settings.MIN_WEIGHT_KG, settings.MAX_WEIGHT_KG, DEFAULT_ESTIMATE["weight"]),
        "category": category if category in SCRAP_CATEGORIES else DEFAULT_ESTIMATE["category"],
        "confidence": _clamp(parsed.get("confidence"), 0, 100, DEFAULT_ESTIMATE["confidence"]),
    }

def build_payload(image_base64: str) -> Dict:
    return {
        "model": settings.AI_MODEL,
        "messages": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": "Estimate the weight and category of this scrap material."},
                    {"type": "image_url", "image_url": {"url": image_base64}},
                ],
            },
        ],
        "tools": [ESTIMATE_TOOL],
        "tool_choice": {"type": "function", "function": {"name": "estimate_scrap"}},
    }

def estimate_scrap_weight(image_base64: str) -> Dict:
    """Ask the AI gateway for a weight/category/confidence estimate of the pictured scrap."""
    if not settings.AI_GATEWAY_API_KEY:
        raise AIGatewayError(500, "AI service not configured")

    headers = {
        "Authorization": f"Bearer {settings.AI_GATEWAY_API_KEY}",
        "Content-Type": "application/json",
    }
    try:
        response = requests.post(
            settings.AI_GATEWAY_URL,
            json=build_payload(image_base64),
            headers=headers,
            timeout=settings.AI_REQUEST_TIMEOUT,
        )
    except requests.RequestException as e:
        logger.error(f"AI gateway request failed: {e}")
        raise AIGatewayError(500, "AI analysis failed") from e

    if response.status_code == 429:
        raise AIGatewayError(429, "AI rate limit exceeded. Please try again shortly.")
    if response.status_code == 402:
        raise AIGatewayError(402, "AI credits exhausted. Please add credits.")
    if not response.ok:
        logger.error(f"AI error: {response.status_code} {response.text}")
        raise AIGatewayError(500, "AI analysis failed")

    try:
        data = response.json()
    except ValueError as e:
        logger.error(f"AI gateway returned invalid JSON: {e}")
        raise AIGatewayError(500, "AI analysis failed") from e

    try:
        arguments = data["choices"][0]["message"]["tool_calls"][0]["function"]["arguments"]
    except (KeyError, IndexError, TypeError):
        arguments = None

    result = normalize_estimate(arguments)
    logger.info(f"AI estimate: {result}")
    return result
