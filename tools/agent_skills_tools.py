# tools/agent_skills_tools.py

import logging
from typing import List, Optional

from langchain_core.tools import tool
from pydantic import BaseModel, Field

from catalog.models import RecommendationRequest, RecommendationResult
from catalog.recommender import list_categories, recommend, search
from common.config import get_settings

logger = logging.getLogger(__name__)

# --- Pydantic Schemas for Tool Inputs ---

class RecommendAgentSkillsInput(BaseModel):
    project_type: str = Field(default="other", description="Project type, e.g. 'web-app', 'api', 'devops'.")
    tech_stack: List[str] = Field(default_factory=list, description='Technology stack, e.g. ["TypeScript", "React"].')
    user_intent: str = Field(default="", description="What the user wants help with, in free text.")
    max_agents: Optional[int] = Field(default=None, ge=0, description="Maximum number of agents to return.")
    max_skills: Optional[int] = Field(default=None, ge=0, description="Maximum number of skills to return.")

class SearchAgentSkillsInput(BaseModel):
    query: str = Field(description="Text to look for in names, descriptions, tags and categories.")

# --- Pydantic Schemas for Tool Outputs ---

class AgentSkillsOutput(BaseModel):
    agents: List[str] = Field(description="Ids of the selected agents, best first.")
    skills: List[str] = Field(description="Ids of the selected skills, best first.")
    summary: str = Field(description="Human-readable summary of the selection.")

    @classmethod
    def from_result(cls, result: RecommendationResult) -> "AgentSkillsOutput":
        return cls(
            agents=[a.id for a in result.agents],
            skills=[s.id for s in result.skills],
            summary=result.summary,
        )

class CategoriesOutput(BaseModel):
    agent_categories: List[str]
    skill_categories: List[str]

# --- Tool Implementations ---

@tool(args_schema=RecommendAgentSkillsInput)
def recommend_agent_skills(
    project_type: str = "other",
    tech_stack: Optional[List[str]] = None,
    user_intent: str = "",
    max_agents: Optional[int] = None,
    max_skills: Optional[int] = None,
) -> AgentSkillsOutput:
    """
    Recommends agents and skills for a project based on its type, tech stack
    and the user's intent. Results are ranked best first.
    """
    settings = get_settings()
    logger.info(f"Tool: recommend_agent_skills called for project_type: '{project_type}'")
    request = RecommendationRequest(
        project_type=project_type,
        tech_stack=tech_stack or [],
        user_intent=user_intent,
        max_agents=settings.RECOMMEND_MAX_AGENTS if max_agents is None else max_agents,
        max_skills=settings.RECOMMEND_MAX_SKILLS if max_skills is None else max_skills,
    )
    return AgentSkillsOutput.from_result(recommend(request))

@tool(args_schema=SearchAgentSkillsInput)
def search_agent_skills(query: str) -> AgentSkillsOutput:
    """
    Searches the agent and skill catalog by free text. An empty query
    returns the whole catalog.
    """
    logger.info(f"Tool: search_agent_skills called for query: '{query}'")
    return AgentSkillsOutput.from_result(search(query))

@tool
def list_agent_skill_categories() -> CategoriesOutput:
    """Lists every category used by the agent and skill catalogs."""
    index = list_categories()
    return CategoriesOutput(agent_categories=index.agent_categories, skill_categories=index.skill_categories)
