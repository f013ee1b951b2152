# catalog/project_types.py
from typing import Dict, List

from pydantic import BaseModel, ConfigDict, Field

from catalog.models import ProjectType


class ProjectTypeConfig(BaseModel):
    """Metadata shown to users choosing a project type."""
    model_config = ConfigDict(frozen=True)

    project_type: ProjectType
    label: str
    description: str
    default_tech_stack: List[str] = Field(default_factory=list)
    doc_sections: List[str] = Field(default_factory=list, description="Extra docs/ subdirectories for this type.")


PROJECT_TYPE_CONFIGS: Dict[ProjectType, ProjectTypeConfig] = {
    config.project_type: config
    for config in (
        ProjectTypeConfig(
            project_type=ProjectType.LEARNING,
            label="Learning / self-study",
            description="Documenting study material, exercises and results",
            doc_sections=["learning-notes"],
        ),
        ProjectTypeConfig(
            project_type=ProjectType.WEB_APP,
            label="Web application",
            description="Frontend or full-stack web application development",
            default_tech_stack=["HTML", "CSS", "JavaScript"],
            doc_sections=["api-docs", "component-docs"],
        ),
        ProjectTypeConfig(
            project_type=ProjectType.API,
            label="API server",
            description="Backend API server development",
            default_tech_stack=["Node.js"],
            doc_sections=["api-docs"],
        ),
        ProjectTypeConfig(
            project_type=ProjectType.MOBILE,
            label="Mobile app",
            description="iOS/Android mobile application development",
            doc_sections=["design-docs"],
        ),
        ProjectTypeConfig(
            project_type=ProjectType.DATA_SCIENCE,
            label="Data science",
            description="Data analysis and ML/AI projects",
            default_tech_stack=["Python", "Jupyter"],
            doc_sections=["experiment-logs", "dataset-docs"],
        ),
        ProjectTypeConfig(
            project_type=ProjectType.DEVOPS,
            label="DevOps / infrastructure",
            description="CI/CD, infrastructure management and cloud environments",
            default_tech_stack=["Docker", "Kubernetes"],
            doc_sections=["infra-docs", "runbooks"],
        ),
        ProjectTypeConfig(
            project_type=ProjectType.CREATIVE,
            label="Creative / content",
            description="Scenario, document and content writing projects",
            default_tech_stack=["Markdown"],
            doc_sections=["drafts", "references"],
        ),
        ProjectTypeConfig(
            project_type=ProjectType.LIBRARY,
            label="Library / package",
            description="Reusable library or package development",
            doc_sections=["api-docs"],
        ),
        ProjectTypeConfig(
            project_type=ProjectType.MONOREPO,
            label="Monorepo",
            description="Multiple packages or services managed in one repository",
            doc_sections=["package-docs"],
        ),
        ProjectTypeConfig(
            project_type=ProjectType.OTHER,
            label="Other",
            description="Custom project",
        ),
    )
}


def list_project_types() -> List[ProjectTypeConfig]:
    return [PROJECT_TYPE_CONFIGS[t] for t in ProjectType]
