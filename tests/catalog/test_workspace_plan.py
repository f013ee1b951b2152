"""Tests for planning the agent/skill files of a workspace initialization."""

import pytest

from catalog.models import ProjectType
from catalog.recommender import recommend
from catalog.registry import UnknownCatalogEntryError
from catalog.workspace_plan import INDEX_PATH, WorkspaceInitParams, plan_agent_skill_files
from tests.conftest import make_request


@pytest.fixture
def params() -> WorkspaceInitParams:
    return WorkspaceInitParams(
        workspace_name="infra-lab",
        purpose="Kubernetes platform reliability with an SRE mindset",
        workspace_path="/tmp/infra-lab",
        project_type=ProjectType.DEVOPS,
        tech_stack=["Docker", "Terraform"],
    )


def test_plan_uses_workspace_caps(params):
    plan = plan_agent_skill_files(params)

    assert len(plan.agents) == 8
    assert len(plan.skills) == 12
    assert len(plan.files) == 8 + 12 + 1


def test_plan_file_layout(params):
    plan = plan_agent_skill_files(params, max_agents=2, max_skills=2)

    skill_ids = [s.id for s in plan.skills]
    agent_ids = [a.id for a in plan.agents]
    assert plan.files == [
        f".github/skills/{skill_ids[0]}/SKILL.md",
        f".github/skills/{skill_ids[1]}/SKILL.md",
        f".github/agents/{agent_ids[0]}.agent.md",
        f".github/agents/{agent_ids[1]}.agent.md",
        INDEX_PATH,
    ]


def test_plan_falls_back_to_purpose_for_intent(params):
    plan = plan_agent_skill_files(params)
    expected = recommend(
        make_request(
            project_type="devops",
            tech_stack=["Docker", "Terraform"],
            user_intent=params.purpose,
            max_agents=8,
            max_skills=12,
        )
    )

    assert [a.id for a in plan.agents] == [a.id for a in expected.agents]
    assert [s.id for s in plan.skills] == [s.id for s in expected.skills]
    assert plan.agents[0].id == "platform-sre-kubernetes"


def test_explicit_intent_wins_even_when_empty(params):
    params.agent_skills_intent = ""
    plan = plan_agent_skill_files(params)
    expected = recommend(
        make_request(project_type="devops", tech_stack=["Docker", "Terraform"], max_agents=8, max_skills=12)
    )

    assert [a.id for a in plan.agents] == [a.id for a in expected.agents]


def test_explicit_ids_replace_recommendation_per_catalog(params):
    params.skill_ids = ["editorconfig", "refactor"]
    plan = plan_agent_skill_files(params)

    assert [s.id for s in plan.skills] == ["editorconfig", "refactor"]
    # Agents are still recommended.
    assert len(plan.agents) == 8
    assert ".github/skills/editorconfig/SKILL.md" in plan.files


def test_unknown_explicit_id_raises(params):
    params.agent_ids = ["plan", "not-an-agent"]
    with pytest.raises(UnknownCatalogEntryError, match="not-an-agent"):
        plan_agent_skill_files(params)


def test_disabled_agent_skills_plan_nothing(params):
    params.include_agent_skills = False
    plan = plan_agent_skill_files(params)

    assert plan.agents == []
    assert plan.skills == []
    assert plan.files == []
