from __future__ import annotations
import httpx
from typing import Any, Dict, Optional
from .settings import settings

class AnthropicClient:
	def __init__(
		self,
		api_key: Optional[str] = None,
		*,
		base_url: Optional[str] = None,
		model: Optional[str] = None,
		timeout: Optional[float] = None,
	) -> None:
		self.api_key = api_key or settings.anthropic_api_key
		if not self.api_key:
			raise ValueError("ANTHROPIC_API_KEY is not configured")
		self.model = model or settings.anthropic_model
		self.base_url = base_url or settings.anthropic_base_url
		self._headers = {
			"Content-Type": "application/json",
			"x-api-key": self.api_key,
			"anthropic-version": settings.anthropic_version,
		}
		self._client = httpx.AsyncClient(timeout=timeout or settings.ai_timeout_seconds)

	async def generate(
		self,
		prompt: str,
		*,
		system: Optional[str] = None,
		max_tokens: Optional[int] = None,
		temperature: Optional[float] = None,
	) -> str:
		payload: Dict[str, Any] = {
			"model": self.model,
			"max_tokens": max_tokens or settings.ai_max_tokens,
			"temperature": settings.ai_temperature if temperature is None else temperature,
			"messages": [{"role": "user", "content": prompt}],
		}
		if system:
			payload["system"] = system
		# Single attempt: callers fall back to local scoring instead of retrying
		r = await self._client.post(self.base_url, headers=self._headers, json=payload)
		r.raise_for_status()
		try:
			data = r.json()
			text = data["content"][0]["text"]
		except Exception:
			raise RuntimeError(f"Unexpected Anthropic response: {r.text}")
		if not text:
			raise RuntimeError("Empty AI response content")
		return text

	async def aclose(self) -> None:
		await self._client.aclose()
