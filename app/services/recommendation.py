import logging
from typing import List, Optional, Sequence
import requests
from app.core.config import settings

logger = logging.getLogger(__name__)

MAX_RECOMMENDATIONS = 3

SYSTEM_PROMPT = (
    "You are a helpful shopping assistant. "
    "Suggest 2-3 complementary products based on what the customer purchased."
)

class RecommendationService:
    """Interface for best-effort product suggestions.

    Subclasses implement ``recommend`` so that it returns ``[]`` on failure
    instead of raising. The base method itself is abstract.
    """

    def recommend(self, product_names: Sequence[str]) -> List[str]:
        raise NotImplementedError

class NullRecommendationService(RecommendationService):
    def recommend(self, product_names: Sequence[str]) -> List[str]:
        return []

def parse_suggestions(text: str) -> List[str]:
    lines = [line.strip() for line in text.split("\n")]
    return [line for line in lines if line][:MAX_RECOMMENDATIONS]

class GatewayRecommendationService(RecommendationService):
    """Asks an OpenAI-compatible chat completions endpoint for suggestions."""

    def __init__(self, url: str, api_key: Optional[str], model: str, timeout: float = 10.0):
        self.url = url
        self.api_key = api_key
        self.model = model
        self.timeout = timeout

    def _payload(self, product_names: Sequence[str]) -> dict:
        purchased = ", ".join(product_names)
        return {
            "model": self.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {
                    "role": "user",
                    "content": (
                        f"The customer just bought: {purchased}. Suggest 2-3 complementary "
                        "products they might also like. Keep suggestions brief and practical."
                    ),
                },
            ],
        }

    def recommend(self, product_names: Sequence[str]) -> List[str]:
        if not self.api_key:
            logger.info("No AI gateway key configured, skipping recommendations")
            return []

        try:
            response = requests.post(
                self.url,
                json=self._payload(product_names),
                headers={"Authorization": f"Bearer {self.api_key}"},
                timeout=self.timeout,
            )
            response.raise_for_status()
            content = response.json()["choices"][0]["message"]["content"] or ""
            return parse_suggestions(content)
        except (requests.RequestException, ValueError, KeyError, IndexError, TypeError, AttributeError) as e:
            # Don't fail the checkout if recommendations fail
            logger.warning("AI recommendation error: %s", e)
            return []

def get_recommendation_service() -> RecommendationService:
    if not settings.AI_RECOMMENDATIONS_ENABLED:
        return NullRecommendationService()
    return GatewayRecommendationService(
        url=settings.AI_GATEWAY_URL,
        api_key=settings.AI_GATEWAY_API_KEY,
        model=settings.AI_MODEL,
        timeout=settings.AI_TIMEOUT_SECONDS,
    )
