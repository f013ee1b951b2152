# tool_server.py
import logging
from typing import List, Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from pydantic import BaseModel

from catalog.models import ProjectType, RecommendationRequest
from catalog.project_types import ProjectTypeConfig, list_project_types
from catalog.recommender import list_categories, recommend, search
from catalog.registry import UnknownCatalogEntryError
from catalog.workspace_plan import WorkspaceInitParams, plan_agent_skill_files
from common.config import Settings, get_settings
from tools.agent_skills_tools import AgentSkillsOutput, CategoriesOutput

logger = logging.getLogger(__name__)

# --- Tool Schemas ---

class ProjectTypesOutput(BaseModel):
    project_types: List[ProjectTypeConfig]

class FilePlanOutput(BaseModel):
    agents: List[str]
    skills: List[str]
    files: List[str]

# --- Server Construction ---

def build_server(settings: Optional[Settings] = None) -> FastMCP:
    """Creates the MCP server with every catalog tool registered."""
    settings = settings or get_settings()
    mcp_server = FastMCP(name=settings.MCP_SERVER_NAME)

    @mcp_server.tool(name="recommend_agent_skills")
    def recommend_agent_skills(
        project_type: str = ProjectType.OTHER.value,
        tech_stack: Optional[List[str]] = None,
        user_intent: str = "",
        max_agents: int = settings.RECOMMEND_MAX_AGENTS,
        max_skills: int = settings.RECOMMEND_MAX_SKILLS,
    ) -> AgentSkillsOutput:
        """
        Recommends agents and skills for a project from its type, tech stack
        and free-text intent. Unknown project types are accepted.
        """
        logger.info(f"recommend_agent_skills: project_type={project_type!r} tech_stack={tech_stack}")
        request = RecommendationRequest(
            project_type=project_type,
            tech_stack=tech_stack or [],
            user_intent=user_intent,
            max_agents=max_agents,
            max_skills=max_skills,
        )
        return AgentSkillsOutput.from_result(recommend(request))

    @mcp_server.tool(name="search_agent_skills")
    def search_agent_skills(query: str) -> AgentSkillsOutput:
        """Searches agents and skills by name, description, tags and categories."""
        logger.info(f"search_agent_skills: query={query!r}")
        return AgentSkillsOutput.from_result(search(query))

    @mcp_server.tool(name="list_agent_skill_categories")
    def list_agent_skill_categories() -> CategoriesOutput:
        """Lists the distinct categories used by agents and by skills."""
        index = list_categories()
        return CategoriesOutput(agent_categories=index.agent_categories, skill_categories=index.skill_categories)

    @mcp_server.tool(name="list_project_types")
    def list_project_types_tool() -> ProjectTypesOutput:
        """Lists the available project types. Useful when the user is unsure which one to choose."""
        return ProjectTypesOutput(project_types=list_project_types())

    @mcp_server.tool(name="preview_agent_skill_files")
    def preview_agent_skill_files(
        workspace_name: str,
        purpose: str,
        workspace_path: str,
        project_type: ProjectType = ProjectType.OTHER,
        tech_stack: Optional[List[str]] = None,
        agent_skills_intent: Optional[str] = None,
        agent_ids: Optional[List[str]] = None,
        skill_ids: Optional[List[str]] = None,
    ) -> FilePlanOutput:
        """
        Previews which agent and skill files a workspace initialization would
        create, without writing anything. Explicit ids replace the recommendation.
        """
        params = WorkspaceInitParams(
            workspace_name=workspace_name,
            purpose=purpose,
            workspace_path=workspace_path,
            project_type=project_type,
            tech_stack=tech_stack or [],
            agent_skills_intent=agent_skills_intent,
            agent_ids=agent_ids,
            skill_ids=skill_ids,
        )
        try:
            plan = plan_agent_skill_files(
                params,
                max_agents=settings.WORKSPACE_MAX_AGENTS,
                max_skills=settings.WORKSPACE_MAX_SKILLS,
            )
        except UnknownCatalogEntryError as e:
            logger.error(f"preview_agent_skill_files FAILED for '{workspace_name}': {e}")
            raise ToolError(str(e)) from e
        return FilePlanOutput(
            agents=[a.id for a in plan.agents],
            skills=[s.id for s in plan.skills],
            files=plan.files,
        )

    return mcp_server


# --- Main Execution ---

if __name__ == "__main__":
    settings = get_settings()
    # Log to stderr; stdout carries the protocol on the stdio transport.
    logging.basicConfig(level=settings.LOG_LEVEL.upper(), format="%(levelname)-8s %(name)s:%(lineno)d - %(message)s")

    mcp_server = build_server(settings)
    if settings.MCP_TRANSPORT == "streamable-http":
        logger.info(f"Starting MCP Tool Server at http://{settings.MCP_SERVER_HOST}:{settings.MCP_SERVER_PORT}")
        mcp_server.run(transport="streamable-http", host=settings.MCP_SERVER_HOST, port=settings.MCP_SERVER_PORT)
    else:
        logger.info("Starting MCP Tool Server on stdio")
        mcp_server.run(transport="stdio")
