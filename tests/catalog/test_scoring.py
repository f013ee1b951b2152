"""Tests for entry scoring and ranking."""

import pytest

from catalog.models import AgentEntry, SkillEntry
from catalog.registry import AGENT_REGISTRY, SKILL_REGISTRY
from catalog.scoring import priority_bonus, rank_entries, score_entry
from tests.conftest import make_request


def _agent(**overrides) -> AgentEntry:
    fields = dict(
        id="sample",
        name="Sample",
        description="Sample agent",
        categories=["engineering"],
        tags=[],
        relevant_project_types=["api"],
        tech_keywords=[],
        priority=3,
    )
    fields.update(overrides)
    return AgentEntry(**fields)


def test_priority_bonus_values():
    assert [priority_bonus(p) for p in (1, 2, 3)] == [6, 4, 2]


def test_zero_relevance_scores_priority_floor():
    entry = _agent(priority=2)
    request = make_request(project_type="web-app", tech_stack=["Go"], user_intent="nothing relevant")
    assert score_entry(entry, request) == 4


def test_project_type_match_is_exact():
    entry = _agent()
    assert score_entry(entry, make_request(project_type="api")) == 12
    assert score_entry(entry, make_request(project_type="API")) == 2
    assert score_entry(entry, make_request(project_type="api-gateway")) == 2


@pytest.mark.parametrize("project_type", ["api", "other", "unknown-type", ""])
def test_wildcard_matches_every_project_type(project_type):
    entry = _agent(relevant_project_types=["*"])
    assert score_entry(entry, make_request(project_type=project_type)) == 12


def test_tech_match_is_case_insensitive_and_symmetric():
    entry = _agent(relevant_project_types=[], tech_keywords=["TypeScript"])
    # Stack item contains keyword.
    assert score_entry(entry, make_request(tech_stack=["TypeScript 5"])) == 7
    # Keyword contains stack item.
    assert score_entry(entry, make_request(tech_stack=["script"])) == 7
    assert score_entry(entry, make_request(tech_stack=["typescript"])) == 7
    assert score_entry(entry, make_request(tech_stack=["Rust"])) == 2


def test_tech_keyword_counts_once_however_many_stack_items_match():
    entry = _agent(relevant_project_types=[], tech_keywords=["React", "Next.js"])
    request = make_request(tech_stack=["React", "react-dom", "REACT"])
    assert score_entry(entry, request) == 5 + 2


def test_empty_stack_item_matches_every_keyword():
    entry = _agent(relevant_project_types=[], tech_keywords=["Docker", "Kubernetes"])
    assert score_entry(entry, make_request(tech_stack=[""])) == 10 + 2


def test_intent_tags_add_three_each():
    entry = _agent(relevant_project_types=[], tags=["api", "rest", "graphql"])
    request = make_request(user_intent="Build a REST API with GraphQL later")
    assert score_entry(entry, request) == 9 + 2


def test_intent_matching_lowercases_tags_too():
    # Intentional normalization: an upper-case tag still matches. Catalog tags
    # are all lower-case, so catalog rankings are unaffected.
    entry = _agent(relevant_project_types=[], tags=["GraphQL"])
    assert score_entry(entry, make_request(user_intent="graphql schema")) == 5
    assert all(tag == tag.lower() for e in AGENT_REGISTRY + SKILL_REGISTRY for tag in e.tags)


def test_signals_add_up():
    entry = _agent(tags=["api"], tech_keywords=["Python"], priority=1)
    request = make_request(project_type="api", tech_stack=["python"], user_intent="api work")
    assert score_entry(entry, request) == 10 + 5 + 3 + 6


@pytest.mark.parametrize(
    "request_fields",
    [
        {},
        {"project_type": "unknown-type"},
        {"project_type": "devops", "tech_stack": ["Docker"], "user_intent": "kubernetes sre"},
    ],
)
def test_every_catalog_entry_scores_at_least_its_priority_floor(request_fields):
    request = make_request(**request_fields)
    for entry in AGENT_REGISTRY + SKILL_REGISTRY:
        assert score_entry(entry, request) >= priority_bonus(entry.priority)


def test_rank_never_filters_and_truncates_to_limit():
    request = make_request(project_type="nothing-matches-this")
    assert len(rank_entries(AGENT_REGISTRY, request, 1000)) == len(AGENT_REGISTRY)
    assert len(rank_entries(SKILL_REGISTRY, request, 5)) == 5
    assert rank_entries(SKILL_REGISTRY, request, 0) == []


def test_rank_is_stable_for_equal_scores():
    first = _agent(id="first")
    second = _agent(id="second")
    third = _agent(id="third", priority=1)
    ranked = rank_entries([first, second, third], make_request(), 10)
    assert [e.id for e in ranked] == ["third", "first", "second"]


def test_rank_orders_by_descending_score():
    request = make_request(project_type="api", tech_stack=["TypeScript"])
    ranked = rank_entries(AGENT_REGISTRY, request, 100)
    scores = [score_entry(e, request) for e in ranked]
    assert scores == sorted(scores, reverse=True)


def test_rank_works_for_skills():
    entries = [
        SkillEntry(id="a", name="A", description="", categories=["git"], priority=3),
        SkillEntry(id="b", name="B", description="", categories=["git"], priority=1),
    ]
    assert [s.id for s in rank_entries(entries, make_request(), 10)] == ["b", "a"]
