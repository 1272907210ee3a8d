"""
Hugging Face Inference API client for optional free-text generation.

Affirmations never depend on it: callers fall back to the local generator when
the API is unreachable or no token is configured.
"""
import logging
from typing import Any, Dict, Optional

import httpx

from app.config import settings

logger = logging.getLogger(__name__)


class InferenceError(Exception):
    """The inference API could not produce text."""


class HuggingFaceClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.huggingface_api_key
        self.api_url = (api_url or settings.huggingface_api_url).rstrip("/")
        self.model = model or settings.huggingface_model
        self.timeout = timeout or settings.huggingface_timeout
        self._transport = transport
        if not self.api_key:
            logger.warning("HUGGINGFACE_API_KEY not set; using the anonymous free tier")

    def _build_headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def _post(self, payload: Dict[str, Any]) -> Any:
        with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
            response = client.post(
                f"{self.api_url}/{self.model}",
                headers=self._build_headers(),
                json=payload,
            )
            response.raise_for_status()
            return response.json()

    def is_available(self) -> bool:
        """Cheap one-token request; any failure means unavailable."""
        try:
            self._post({
                "inputs": "test",
                "parameters": {"max_new_tokens": 1},
                "options": {"wait_for_model": False, "use_cache": True},
            })
            return True
        except Exception as e:
            logger.info(f"Inference API unavailable: {e}")
            return False

    def generate(self, prompt: str, max_new_tokens: int = 60) -> str:
        try:
            result = self._post({
                "inputs": prompt,
                "parameters": {"max_new_tokens": max_new_tokens, "return_full_text": False},
                "options": {"wait_for_model": True},
            })
        except httpx.HTTPStatusError as e:
            logger.error(f"Inference API error: {e.response.status_code}")
            raise InferenceError(f"Inference API error: {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.error(f"Inference API request failed: {e}")
            raise InferenceError(str(e)) from e

        if isinstance(result, list) and result and "generated_text" in result[0]:
            return result[0]["generated_text"].strip()
        if isinstance(result, dict) and "generated_text" in result:
            return result["generated_text"].strip()
        raise InferenceError("Unexpected inference response")


def get_inference_client() -> HuggingFaceClient:
    return HuggingFaceClient()
