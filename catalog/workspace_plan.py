# catalog/workspace_plan.py
"""Selects the agents and skills a workspace initialization installs, and where their files go."""

import logging
from typing import List, Optional

from pydantic import BaseModel, Field

from catalog.models import AgentEntry, ProjectType, RecommendationRequest, SkillEntry
from catalog.recommender import recommend
from catalog.registry import select_agents, select_skills

logger = logging.getLogger(__name__)

SKILLS_DIR = ".github/skills"
AGENTS_DIR = ".github/agents"
INDEX_PATH = ".github/AGENT-SKILLS.md"

DEFAULT_MAX_AGENTS = 8
DEFAULT_MAX_SKILLS = 12


class WorkspaceInitParams(BaseModel):
    workspace_name: str = Field(description="Name of the workspace (used in headings, file names).")
    purpose: str = Field(description="Primary purpose and goals of this workspace.")
    workspace_path: str = Field(description="Absolute path to the workspace root directory.")
    project_type: ProjectType = Field(default=ProjectType.OTHER, description="Type of project.")
    tech_stack: List[str] = Field(default_factory=list, description='Technology stack, e.g. ["TypeScript", "React"].')
    include_agent_skills: bool = Field(default=True, description="Whether to install agents and skills at all.")
    agent_skills_intent: Optional[str] = Field(
        default=None, description="Intent used for recommendation tuning; falls back to the purpose."
    )
    agent_ids: Optional[List[str]] = Field(default=None, description="Explicit agent ids, replacing the recommended agents.")
    skill_ids: Optional[List[str]] = Field(default=None, description="Explicit skill ids, replacing the recommended skills.")


class AgentSkillFilePlan(BaseModel):
    agents: List[AgentEntry] = Field(default_factory=list)
    skills: List[SkillEntry] = Field(default_factory=list)
    files: List[str] = Field(default_factory=list, description="Paths relative to the workspace root.")


def skill_file_path(skill: SkillEntry) -> str:
    return f"{SKILLS_DIR}/{skill.id}/SKILL.md"


def agent_file_path(agent: AgentEntry) -> str:
    return f"{AGENTS_DIR}/{agent.id}.agent.md"


def plan_agent_skill_files(
    params: WorkspaceInitParams,
    max_agents: int = DEFAULT_MAX_AGENTS,
    max_skills: int = DEFAULT_MAX_SKILLS,
) -> AgentSkillFilePlan:
    """
    Builds the install plan for a workspace.

    Explicit id lists win over the recommendation for their own catalog.
    Raises UnknownCatalogEntryError if an explicit id is not in the catalog.
    """
    if not params.include_agent_skills:
        logger.info(f"Agent skills disabled for workspace '{params.workspace_name}'")
        return AgentSkillFilePlan()

    intent = params.agent_skills_intent if params.agent_skills_intent is not None else params.purpose
    result = recommend(
        RecommendationRequest(
            project_type=params.project_type.value,
            tech_stack=params.tech_stack,
            user_intent=intent,
            max_agents=max_agents,
            max_skills=max_skills,
        )
    )

    agents = select_agents(params.agent_ids) if params.agent_ids is not None else result.agents
    skills = select_skills(params.skill_ids) if params.skill_ids is not None else result.skills

    files = [skill_file_path(s) for s in skills]
    files += [agent_file_path(a) for a in agents]
    files.append(INDEX_PATH)

    logger.info(
        f"Planned {len(files)} agent skill files for '{params.workspace_name}' "
        f"({len(agents)} agents, {len(skills)} skills)"
    )
    return AgentSkillFilePlan(agents=agents, skills=skills, files=files)
