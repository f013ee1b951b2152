"""Tests for the recommend/search/list_categories operations."""

import pytest
from pydantic import ValidationError

from catalog.recommender import list_categories, recommend, search
from catalog.registry import AGENT_REGISTRY, SKILL_REGISTRY
from catalog.scoring import score_entry
from tests.conftest import make_request


def _ids(entries):
    return [e.id for e in entries]


# --- recommend ---

def test_api_architect_outranks_wildcard_specialist_for_api_projects():
    result = recommend(make_request(project_type="api", tech_stack=["TypeScript"]))
    agent_ids = _ids(result.agents)

    # Priority 3, wildcard, no tech keywords.
    assert agent_ids.index("api-architect") < agent_ids.index("devils-advocate")
    assert agent_ids.index("api-architect") < agent_ids.index("janitor")


def test_api_typescript_top_five():
    result = recommend(make_request(project_type="api", tech_stack=["TypeScript"], max_agents=5, max_skills=5))

    assert len(result.agents) == 5
    assert len(result.skills) == 5
    # Project type + TypeScript keyword lifts the MCP expert above the priority-1 wildcards.
    assert result.agents[0].id == "typescript-mcp-expert"
    assert result.skills[0].id == "typescript-mcp-server-generator"


def test_unknown_project_type_returns_whole_catalog_by_priority():
    result = recommend(make_request(project_type="unknown-type"))

    assert len(result.agents) == len(AGENT_REGISTRY)
    assert len(result.skills) == len(SKILL_REGISTRY)

    request = make_request(project_type="unknown-type")
    for ranked, registry in ((result.agents, AGENT_REGISTRY), (result.skills, SKILL_REGISTRY)):
        expected = sorted(registry, key=lambda e: score_entry(e, request), reverse=True)
        assert _ids(ranked) == _ids(expected)


def test_equal_scores_keep_declaration_order():
    result = recommend(make_request(project_type="unknown-type"))
    request = make_request(project_type="unknown-type")
    position = {e.id: i for i, e in enumerate(AGENT_REGISTRY)}

    for a, b in zip(result.agents, result.agents[1:]):
        if score_entry(a, request) == score_entry(b, request):
            assert position[a.id] < position[b.id]


@pytest.mark.parametrize("max_agents,max_skills", [(0, 0), (3, 7), (1000, 1000)])
def test_result_length_is_min_of_catalog_and_cap(max_agents, max_skills):
    result = recommend(make_request(project_type="library", max_agents=max_agents, max_skills=max_skills))
    assert len(result.agents) == min(len(AGENT_REGISTRY), max_agents)
    assert len(result.skills) == min(len(SKILL_REGISTRY), max_skills)


def test_web_app_single_agent_no_skills():
    result = recommend(
        make_request(
            project_type="web-app",
            tech_stack=["React", "Next.js"],
            user_intent="need frontend help",
            max_agents=1,
            max_skills=0,
        )
    )

    assert _ids(result.agents) == ["expert-nextjs-developer"]
    assert result.skills == []
    assert "## Recommended skills (0)\n  none" in result.summary


def test_recommendation_summary_lists_selected_entries():
    result = recommend(make_request(project_type="devops", tech_stack=["Docker"], max_agents=2, max_skills=2))
    summary = result.summary

    assert summary.startswith("Recommended agent skills (project: devops, tech: Docker)")
    assert "## Recommended agents (2)" in summary
    assert "## Recommended skills (2)" in summary
    for entry in result.agents + result.skills:
        assert f"  - **{entry.name}** (`{entry.id}`): {entry.description}" in summary


def test_recommendation_summary_without_stack():
    result = recommend(make_request(max_agents=1, max_skills=1))
    assert "tech: unspecified" in result.summary


def test_negative_caps_are_rejected():
    with pytest.raises(ValidationError):
        make_request(max_agents=-1)


# --- search ---

def test_search_empty_query_returns_everything_in_order():
    result = search("")
    assert _ids(result.agents) == _ids(AGENT_REGISTRY)
    assert _ids(result.skills) == _ids(SKILL_REGISTRY)


def _mentions(entry, needle):
    haystacks = [entry.name.lower(), entry.description.lower()]
    haystacks += [t.lower() for t in entry.tags]
    haystacks += [c.value for c in entry.categories]
    return any(needle in h for h in haystacks)


def test_search_docker():
    result = search("docker")

    assert "multi-stage-dockerfile" in _ids(result.skills)
    assert "containerize-aspnetcore" in _ids(result.skills)
    for entry in result.agents + result.skills:
        assert _mentions(entry, "docker")
    # Tech keywords are not searched: this agent only lists Docker there.
    assert "platform-sre-kubernetes" not in _ids(result.agents)
    assert "plan" not in _ids(result.agents)


def test_search_is_case_insensitive_and_matches_categories():
    upper = search("DEVOPS")
    lower = search("devops")
    assert _ids(upper.agents) == _ids(lower.agents)
    assert _ids(upper.skills) == _ids(lower.skills)
    # Matched through the "devops" category only.
    assert "terraform" in _ids(lower.agents)


def test_search_keeps_declaration_order():
    result = search("test")
    position = {e.id: i for i, e in enumerate(SKILL_REGISTRY)}
    indexes = [position[s.id] for s in result.skills]
    assert indexes == sorted(indexes)


def test_search_summary():
    result = search("zzz-no-match")
    assert result.agents == [] and result.skills == []
    assert result.summary == 'Search results for "zzz-no-match"\n\n## Agents (0)\n  none\n\n## Skills (0)\n  none'


# --- list_categories ---

def test_list_categories_sorted_and_distinct():
    index = list_categories()

    for categories in (index.agent_categories, index.skill_categories):
        assert categories == sorted(categories)
        assert len(categories) == len(set(categories))

    assert "planning" in index.agent_categories
    assert "blueprint" in index.skill_categories
    assert "blueprint" not in index.agent_categories


def test_list_categories_only_reports_used_categories():
    index = list_categories()
    used = {c.value for a in AGENT_REGISTRY for c in a.categories}
    assert set(index.agent_categories) == used
    # Declared in the vocabulary but not used by any agent.
    assert "creative" not in index.agent_categories
