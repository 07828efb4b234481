"""
Prompt Service

Reflection prompts offered while writing a check-in. Which prompts are
eligible depends on how the day went, unless the composer asks for one
specific category (e.g. the "what worked" field asks for solution prompts).

Selection:
==========
    category given        → that category only
    day_type = stuck      → stuck + general
    day_type = breakthrough → breakthrough + general
    otherwise             → general

The eligible prompts are shuffled and at most five are returned.
"""

import random
from typing import Optional

from buildlog.shared.models.enums import DayType, PromptCategory


MAX_PROMPTS = 5

PROMPTS: dict[PromptCategory, tuple[str, ...]] = {
    PromptCategory.GENERAL: (
        "What's the one thing I want to accomplish today?",
        "What would make today feel successful?",
        "What's the most important decision I made?",
        "What would I do differently next time?",
        "What's surprising me about this project?",
    ),
    PromptCategory.STUCK: (
        "What assumption might be wrong?",
        "Who could I ask for help?",
        "What's the simplest version of this I could build?",
        "What would I tell a junior dev facing this?",
        "What's the real problem I'm trying to solve?",
        "What resources haven't I tried yet?",
    ),
    PromptCategory.BREAKTHROUGH: (
        "What was the 'aha moment'?",
        "Why did this solution work when others didn't?",
        "What would my past self need to know?",
        "How could I explain this to someone else?",
        "What pattern can I apply elsewhere?",
        "What made this click today?",
    ),
    PromptCategory.PROBLEM: (
        "What user pain point am I addressing?",
        "What's the technical challenge here?",
        "What constraints am I working within?",
    ),
    PromptCategory.SOLUTION: (
        "What approach am I taking?",
        "What alternatives did I consider?",
        "What trade-offs did I make?",
    ),
    PromptCategory.LEARNING: (
        "What did I learn that I didn't expect?",
        "What would I research more?",
        "What mistake taught me something?",
    ),
}


class PromptService:
    """Stateless prompt picker. ``rng`` can be seeded for reproducible output."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    @staticmethod
    def eligible_categories(
        day_type: Optional[DayType] = None,
        category: Optional[PromptCategory] = None,
    ) -> list[PromptCategory]:
        if category is not None:
            return [category]
        if day_type == DayType.STUCK:
            return [PromptCategory.STUCK, PromptCategory.GENERAL]
        if day_type == DayType.BREAKTHROUGH:
            return [PromptCategory.BREAKTHROUGH, PromptCategory.GENERAL]
        return [PromptCategory.GENERAL]

    def pick(
        self,
        day_type: Optional[DayType] = None,
        category: Optional[PromptCategory] = None,
        limit: int = MAX_PROMPTS,
    ) -> tuple[list[str], list[PromptCategory]]:
        """
        Pick shuffled prompts.

        Returns:
            Tuple of (prompts, categories they were drawn from)
        """
        categories = self.eligible_categories(day_type, category)
        pool = [prompt for cat in categories for prompt in PROMPTS[cat]]
        self.rng.shuffle(pool)
        return pool[: min(limit, MAX_PROMPTS)], categories
