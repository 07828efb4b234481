import random

from buildlog.shared.models.enums import DayType, PromptCategory
from buildlog.shared.services.prompt_service import MAX_PROMPTS, PROMPTS, PromptService


def test_stuck_days_mix_stuck_and_general():
    prompts, categories = PromptService(random.Random(1)).pick(day_type=DayType.STUCK)

    assert categories == [PromptCategory.STUCK, PromptCategory.GENERAL]
    eligible = set(PROMPTS[PromptCategory.STUCK]) | set(PROMPTS[PromptCategory.GENERAL])
    assert len(prompts) == MAX_PROMPTS
    assert set(prompts) <= eligible


def test_explicit_category_wins_over_day_type():
    prompts, categories = PromptService().pick(
        day_type=DayType.STUCK, category=PromptCategory.SOLUTION
    )

    assert categories == [PromptCategory.SOLUTION]
    assert sorted(prompts) == sorted(PROMPTS[PromptCategory.SOLUTION])


def test_same_seed_same_order():
    first, _ = PromptService(random.Random(7)).pick(day_type=DayType.BREAKTHROUGH)
    second, _ = PromptService(random.Random(7)).pick(day_type=DayType.BREAKTHROUGH)

    assert first == second


async def test_prompts_endpoint(client, auth_headers):
    response = await client.get(
        "/check-ins/prompts", params={"day_type": "grind", "limit": 3}, headers=auth_headers
    )

    assert response.status_code == 200
    body = response.json()
    assert body["categories"] == ["general"]
    assert len(body["prompts"]) == 3
