# catalog/recommender.py
import logging
from typing import List, Sequence

from catalog.models import AgentEntry, CategoryIndex, RecommendationRequest, RecommendationResult, SkillEntry
from catalog.registry import AGENT_REGISTRY, SKILL_REGISTRY
from catalog.scoring import rank_entries

logger = logging.getLogger(__name__)

INSTALL_HINT = (
    "Preview the files for the selected entries with the `preview_agent_skill_files` tool;\n"
    "they are deployed under `.github/skills/` and `.github/agents/`."
)


# --- Summary Rendering ---

def _format_entries(entries: Sequence) -> str:
    lines = [f"  - **{e.name}** (`{e.id}`): {e.description}" for e in entries]
    return "\n".join(lines) or "  none"


def render_recommendation_summary(
    agents: Sequence[AgentEntry], skills: Sequence[SkillEntry], request: RecommendationRequest
) -> str:
    tech = ", ".join(request.tech_stack) or "unspecified"
    return (
        f"Recommended agent skills (project: {request.project_type}, tech: {tech})\n"
        f"\n"
        f"## Recommended agents ({len(agents)})\n"
        f"{_format_entries(agents)}\n"
        f"\n"
        f"## Recommended skills ({len(skills)})\n"
        f"{_format_entries(skills)}\n"
        f"\n"
        f"{INSTALL_HINT}"
    )


def render_search_summary(agents: Sequence[AgentEntry], skills: Sequence[SkillEntry], query: str) -> str:
    return (
        f'Search results for "{query}"\n'
        f"\n"
        f"## Agents ({len(agents)})\n"
        f"{_format_entries(agents)}\n"
        f"\n"
        f"## Skills ({len(skills)})\n"
        f"{_format_entries(skills)}"
    )


# --- Operations ---

def recommend(request: RecommendationRequest) -> RecommendationResult:
    """
    Ranks both catalogs against a request.

    Unknown project types, an empty stack and an empty intent are all valid;
    they only lower scores toward the priority floor.
    """
    agents = rank_entries(AGENT_REGISTRY, request, request.max_agents)
    skills = rank_entries(SKILL_REGISTRY, request, request.max_skills)
    logger.debug(
        f"recommend: project_type={request.project_type!r} tech_stack={request.tech_stack} "
        f"-> {len(agents)} agents, {len(skills)} skills"
    )
    summary = render_recommendation_summary(agents, skills, request)
    return RecommendationResult(agents=agents, skills=skills, summary=summary)


def _matches_query(entry, q: str) -> bool:
    return (
        q in entry.name.lower()
        or q in entry.description.lower()
        or any(q in tag.lower() for tag in entry.tags)
        or any(q in category.value for category in entry.categories)
    )


def search(query: str) -> RecommendationResult:
    """Returns every entry whose name, description, tags or categories contain the query."""
    q = query.lower()
    agents: List[AgentEntry] = [a for a in AGENT_REGISTRY if _matches_query(a, q)]
    skills: List[SkillEntry] = [s for s in SKILL_REGISTRY if _matches_query(s, q)]
    logger.debug(f"search: query={query!r} -> {len(agents)} agents, {len(skills)} skills")
    return RecommendationResult(agents=agents, skills=skills, summary=render_search_summary(agents, skills, query))


def list_categories() -> CategoryIndex:
    agent_categories = {c.value for a in AGENT_REGISTRY for c in a.categories}
    skill_categories = {c.value for s in SKILL_REGISTRY for c in s.categories}
    return CategoryIndex(
        agent_categories=sorted(agent_categories),
        skill_categories=sorted(skill_categories),
    )
