# catalog/models.py
from enum import Enum
from typing import List, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

# Matches every project type, known or not.
WILDCARD_PROJECT_TYPE = "*"


class AgentCategory(str, Enum):
    PLANNING = "planning"
    ARCHITECTURE = "architecture"
    ENGINEERING = "engineering"
    DEBUGGING = "debugging"
    TESTING = "testing"
    DEVOPS = "devops"
    DOCUMENTATION = "documentation"
    REVIEW = "review"
    SECURITY = "security"
    DATA = "data"
    FRONTEND = "frontend"
    BACKEND = "backend"
    MOBILE = "mobile"
    CLOUD = "cloud"
    CREATIVE = "creative"
    META = "meta"
    PLATFORM = "platform"


class SkillCategory(str, Enum):
    BLUEPRINT = "blueprint"
    DOCUMENT_GEN = "document-gen"
    CODE_GEN = "code-gen"
    TESTING = "testing"
    DEVOPS = "devops"
    MIGRATION = "migration"
    REFACTOR = "refactor"
    GIT = "git"
    MCP = "mcp"
    PLATFORM = "platform"
    ANALYSIS = "analysis"
    PROMPT = "prompt"
    PROJECT_SETUP = "project-setup"
    INFRASTRUCTURE = "infrastructure"


class ProjectType(str, Enum):
    LEARNING = "learning"
    WEB_APP = "web-app"
    API = "api"
    MOBILE = "mobile"
    DATA_SCIENCE = "data-science"
    DEVOPS = "devops"
    CREATIVE = "creative"
    LIBRARY = "library"
    MONOREPO = "monorepo"
    OTHER = "other"


# --- Catalog Entries ---

class CatalogEntry(BaseModel):
    """Fields shared by agents and skills. Entries are immutable once built."""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Lookup key and output file stem.")
    name: str = Field(..., description="Human-readable display label.")
    description: str = Field(..., description="Free-text summary.")
    tags: Tuple[str, ...] = Field(default=(), description="Keywords matched against user intent.")
    relevant_project_types: Tuple[str, ...] = Field(
        default=(WILDCARD_PROJECT_TYPE,),
        description="Project types this entry applies to, or '*' for all of them.",
    )
    tech_keywords: Tuple[str, ...] = Field(
        default=(), description="Technologies this entry specializes in; empty means not tech-specific."
    )
    priority: int = Field(..., ge=1, le=3, description="1=core, 2=recommended, 3=specialized.")


class AgentEntry(CatalogEntry):
    categories: Tuple[AgentCategory, ...] = Field(..., min_length=1)


class SkillEntry(CatalogEntry):
    categories: Tuple[SkillCategory, ...] = Field(..., min_length=1)
    # Informational only, never scored.
    has_resources: bool = False


AnyEntry = Union[AgentEntry, SkillEntry]


class ScoredEntry(BaseModel):
    """Pairs an entry with its score for the duration of one ranking pass."""
    entry: AnyEntry
    score: int


# --- Requests & Results ---

class RecommendationRequest(BaseModel):
    """Parameters for one recommendation call. The caps have no shared default."""
    project_type: str = Field(default=ProjectType.OTHER.value, description="Project type identifier; unknown values are accepted.")
    tech_stack: List[str] = Field(default_factory=list, description="Technology names, matched case-insensitively.")
    user_intent: str = Field(default="", description="Free text matched against entry tags.")
    max_agents: int = Field(..., ge=0)
    max_skills: int = Field(..., ge=0)


class RecommendationResult(BaseModel):
    agents: List[AgentEntry]
    skills: List[SkillEntry]
    summary: str


class CategoryIndex(BaseModel):
    agent_categories: List[str]
    skill_categories: List[str]

