"""Diet plan generation through an external text model."""

import logging
from dataclasses import dataclass
from typing import Protocol

from nutrition_planner.domain.metrics import MetricsResult
from nutrition_planner.services.prompts import format_diet_prompt

_logger = logging.getLogger(__name__)


class TextGenerationClient(Protocol):
    """Interface for LLM text generation."""

    async def generate(
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
    ) -> str:
        """Return generated text for a prompt."""


@dataclass
class DietPlanService:
    """Service that relays the diet prompt to a text model."""

    client: TextGenerationClient
    model: str
    reasoning_effort: str | None
    store: bool
    cuisine: str = "Indian"
    debug: bool = False

    async def generate(self, result: MetricsResult) -> str:
        """Return a meal-wise diet plan for the given targets."""
        prompt = format_diet_prompt(result, cuisine=self.cuisine)
        reply = await self.client.generate(
            model=self.model,
            reasoning_effort=self.reasoning_effort,
            store=self.store,
            prompt=prompt,
        )
        if self.debug:
            _logger.info(
                "Diet plan generated: model=%s calories=%s chars=%s",
                self.model,
                result.daily_calories,
                len(reply),
            )
        return reply
