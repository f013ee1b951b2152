# catalog/registry.py
"""
Static agent and skill catalog.

Entries were indexed from the github/awesome-copilot repository. Declaration
order matters: it breaks score ties when ranking.
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from catalog.models import AgentEntry, SkillEntry

logger = logging.getLogger(__name__)


class UnknownCatalogEntryError(KeyError):
    """Raised when an explicit id lookup names entries the catalog does not have."""

    def __init__(self, kind: str, missing: List[str]):
        self.kind = kind
        self.missing = missing
        super().__init__(f"Unknown {kind} id(s): {', '.join(missing)}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message.
        return self.args[0]


# --- Agent Registry ---

AGENT_REGISTRY: Tuple[AgentEntry, ...] = (
    # Planning & Architecture
    AgentEntry(
        id="plan",
        name="Plan Mode",
        description="Strategic planning and architecture assistant focused on thoughtful analysis before implementation",
        categories=["planning"],
        tags=["planning", "strategy", "analysis", "think-first"],
        relevant_project_types=["*"],
        tech_keywords=[],
        priority=1,
    ),
    AgentEntry(
        id="planner",
        name="Planner",
        description="Task planning and breakdown assistant",
        categories=["planning"],
        tags=["planning", "task-breakdown", "workflow"],
        relevant_project_types=["*"],
        tech_keywords=[],
        priority=1,
    ),
    AgentEntry(
        id="task-planner",
        name="Task Planner",
        description="Detailed task planning with dependency tracking",
        categories=["planning"],
        tags=["planning", "tasks", "dependencies"],
        relevant_project_types=["*"],
        tech_keywords=[],
        priority=2,
    ),
    AgentEntry(
        id="context-architect",
        name="Context Architect",
        description="Plans and executes multi-file changes by identifying relevant context and dependencies",
        categories=["architecture", "planning"],
        tags=["architecture", "context-map", "dependencies", "multi-file"],
        relevant_project_types=["*"],
        tech_keywords=[],
        priority=1,
    ),
    AgentEntry(
        id="repo-architect",
        name="Repo Architect",
        description="Bootstraps and validates agentic project structures for GitHub Copilot workflows",
        categories=["architecture", "meta"],
        tags=["scaffolding", "repo-structure", "agents", "skills"],
        relevant_project_types=["*"],
        tech_keywords=[],
        priority=1,
    ),
    AgentEntry(
        id="arch",
        name="Architecture",
        description="Software architecture design and review",
        categories=["architecture"],
        tags=["architecture", "design-patterns", "system-design"],
        relevant_project_types=["web-app", "api", "library", "monorepo"],
        tech_keywords=[],
        priority=1,
    ),
    AgentEntry(
        id="blueprint-mode",
        name="Blueprint Mode",
        description="Comprehensive project blueprint generation",
        categories=["architecture", "planning"],
        tags=["blueprint", "architecture", "comprehensive"],
        relevant_project_types=["*"],
        tech_keywords=[],
        priority=2,
    ),
    AgentEntry(
        id="implementation-plan",
        name="Implementation Plan",
        description="Detailed implementation planning for features and changes",
        categories=["planning"],
        tags=["implementation", "planning", "features"],
        relevant_project_types=["*"],
        tech_keywords=[],
        priority=2,
    ),
    # Engineering
    AgentEntry(
        id="principal-software-engineer",
        name="Principal Software Engineer",
        description="Principal-level engineering guidance with focus on engineering excellence and pragmatic implementation",
        categories=["engineering", "review"],
        tags=["best-practices", "clean-code", "solid", "design-patterns", "tech-debt"],
        relevant_project_types=["*"],
        tech_keywords=[],
        priority=1,
    ),
    AgentEntry(
        id="software-engineer-agent-v1",
        name="Software Engineer Agent",
        description="General-purpose software engineering assistant",
        categories=["engineering"],
        tags=["coding", "implementation", "general"],
        relevant_project_types=["*"],
        tech_keywords=[],
        priority=2,
    ),
    AgentEntry(
        id="expert-nextjs-developer",
        name="Expert Next.js Developer",
        description="Specialized Next.js development assistance",
        categories=["engineering", "frontend"],
        tags=["nextjs", "react", "ssr", "fullstack"],
        relevant_project_types=["web-app"],
        tech_keywords=["Next.js", "React", "TypeScript"],
        priority=2,
    ),
    AgentEntry(
        id="expert-react-frontend-engineer",
        name="Expert React Frontend Engineer",
        description="Expert React frontend development",
        categories=["engineering", "frontend"],
        tags=["react", "frontend", "components", "state-management"],
        relevant_project_types=["web-app"],
        tech_keywords=["React", "TypeScript", "JavaScript"],
        priority=2,
    ),
    AgentEntry(
        id="expert-cpp-software-engineer",
        name="Expert C++ Software Engineer",
        description="C++ development expertise",
        categories=["engineering"],
        tags=["cpp", "systems", "performance"],
        relevant_project_types=["library"],
        tech_keywords=["C++"],
        priority=3,
    ),
    AgentEntry(
        id="expert-dotnet-software-engineer",
        name="Expert .NET Software Engineer",
        description=".NET development expertise",
        categories=["engineering"],
        tags=["dotnet", "csharp", "aspnet"],
        relevant_project_types=["web-app", "api"],
        tech_keywords=[".NET", "C#", "ASP.NET"],
        priority=2,
    ),
    AgentEntry(
        id="api-architect",
        name="API Architect",
        description="API design and architecture specialist",
        categories=["architecture", "backend"],
        tags=["api", "rest", "graphql", "openapi"],
        relevant_project_types=["api"],
        tech_keywords=[],
        priority=1,
    ),
    # Debugging
    AgentEntry(
        id="debug",
        name="Debug Mode",
        description="Systematic debugging with 4-phase approach: assess, investigate, resolve, QA",
        categories=["debugging"],
        tags=["debugging", "troubleshooting", "root-cause"],
        relevant_project_types=["*"],
        tech_keywords=[],
        priority=1,
    ),
    # Testing
    AgentEntry(
        id="playwright-tester",
        name="Playwright Tester",
        description="E2E testing with Playwright",
        categories=["testing"],
        tags=["e2e", "playwright", "browser-testing"],
        relevant_project_types=["web-app"],
        tech_keywords=["Playwright", "TypeScript"],
        priority=2,
    ),
    AgentEntry(
        id="polyglot-test-builder",
        name="Polyglot Test Builder",
        description="Multi-language test generation and management",
        categories=["testing"],
        tags=["testing", "polyglot", "multi-language"],
        relevant_project_types=["*"],
        tech_keywords=[],
        priority=2,
    ),
    AgentEntry(
        id="tdd-red",
        name="TDD Red Phase",
        description="Write failing tests first (Red phase of TDD)",
        categories=["testing"],
        tags=["tdd", "red", "test-first"],
        relevant_project_types=["*"],
        tech_keywords=[],
        priority=2,
    ),
    AgentEntry(
        id="tdd-green",
        name="TDD Green Phase",
        description="Make tests pass with minimal code (Green phase of TDD)",
        categories=["testing"],
        tags=["tdd", "green", "implementation"],
        relevant_project_types=["*"],
        tech_keywords=[],
        priority=2,
    ),
    AgentEntry(
        id="tdd-refactor",
        name="TDD Refactor Phase",
        description="Refactor code while keeping tests green",
        categories=["testing"],
        tags=["tdd", "refactor", "clean-code"],
        relevant_project_types=["*"],
        tech_keywords=[],
        priority=2,
    ),
    # DevOps
    AgentEntry(
        id="devops-expert",
        name="DevOps Expert",
        description="DevOps specialist following the infinity loop principle with focus on automation",
        categories=["devops"],
        tags=["devops", "cicd", "automation", "monitoring", "dora"],
        relevant_project_types=["devops", "api", "web-app"],
        tech_keywords=["Docker", "Kubernetes", "Terraform"],
        priority=1,
    ),
    AgentEntry(
        id="platform-sre-kubernetes",
        name="Platform SRE Kubernetes",
        description="Kubernetes platform engineering and SRE",
        categories=["devops", "cloud"],
        tags=["kubernetes", "sre", "platform", "reliability"],
        relevant_project_types=["devops"],
        tech_keywords=["Kubernetes", "Docker"],
        priority=2,
    ),
    AgentEntry(
        id="github-actions-expert",
        name="GitHub Actions Expert",
        description="GitHub Actions CI/CD pipeline specialist",
        categories=["devops"],
        tags=["github-actions", "cicd", "workflows"],
        relevant_project_types=["*"],
        tech_keywords=["GitHub Actions"],
        priority=2,
    ),
    AgentEntry(
        id="terraform",
        name="Terraform",
        description="Terraform infrastructure as code specialist",
        categories=["devops", "cloud"],
        tags=["terraform", "iac", "infrastructure"],
        relevant_project_types=["devops"],
        tech_keywords=["Terraform", "HCL"],
        priority=2,
    ),
    # Documentation
    AgentEntry(
        id="se-technical-writer",
        name="Technical Writer",
        description="Technical documentation writing specialist",
        categories=["documentation"],
        tags=["documentation", "technical-writing", "api-docs"],
        relevant_project_types=["*"],
        tech_keywords=[],
        priority=1,
    ),
    AgentEntry(
        id="gem-documentation-writer",
        name="Documentation Writer",
        description="Documentation generation and management",
        categories=["documentation"],
        tags=["documentation", "writing", "markdown"],
        relevant_project_types=["*"],
        tech_keywords=[],
        priority=2,
    ),
    # Review & Quality
    AgentEntry(
        id="gem-reviewer",
        name="Code Reviewer",
        description="Code review assistant",
        categories=["review"],
        tags=["code-review", "quality", "standards"],
        relevant_project_types=["*"],
        tech_keywords=[],
        priority=1,
    ),
    AgentEntry(
        id="se-security-reviewer",
        name="Security Reviewer",
        description="Security-focused code review",
        categories=["review", "security"],
        tags=["security", "review", "vulnerabilities"],
        relevant_project_types=["*"],
        tech_keywords=[],
        priority=2,
    ),
    AgentEntry(
        id="se-system-architecture-reviewer",
        name="System Architecture Reviewer",
        description="System architecture review and assessment",
        categories=["review", "architecture"],
        tags=["architecture", "review", "assessment"],
        relevant_project_types=["*"],
        tech_keywords=[],
        priority=2,
    ),
    AgentEntry(
        id="critical-thinking",
        name="Critical Thinking",
        description="Challenges assumptions and encourages deeper analysis",
        categories=["review"],
        tags=["critical-thinking", "analysis", "assumptions"],
        relevant_project_types=["*"],
        tech_keywords=[],
        priority=2,
    ),
    AgentEntry(
        id="devils-advocate",
        name="Devil's Advocate",
        description="Challenges decisions to strengthen solutions",
        categories=["review"],
        tags=["devils-advocate", "challenge", "robustness"],
        relevant_project_types=["*"],
        tech_keywords=[],
        priority=3,
    ),
    # Prompt & Meta
    AgentEntry(
        id="prompt-engineer",
        name="Prompt Engineer",
        description="Analyzes and improves prompts following OpenAI best practices",
        categories=["meta"],
        tags=["prompt-engineering", "optimization", "llm"],
        relevant_project_types=["*"],
        tech_keywords=[],
        priority=2,
    ),
    AgentEntry(
        id="meta-agentic-project-scaffold",
        name="Meta Agentic Project Scaffold",
        description="Meta-agent for pulling and organizing agentic project structures",
        categories=["meta"],
        tags=["meta", "scaffolding", "agents", "organization"],
        relevant_project_types=["*"],
        tech_keywords=[],
        priority=2,
    ),
    AgentEntry(
        id="custom-agent-foundry",
        name="Custom Agent Foundry",
        description="Create custom agent definitions",
        categories=["meta"],
        tags=["agent-creation", "customization", "meta"],
        relevant_project_types=["*"],
        tech_keywords=[],
        priority=3,
    ),
    # MCP Experts
    AgentEntry(
        id="typescript-mcp-expert",
        name="TypeScript MCP Expert",
        description="TypeScript MCP server development specialist",
        categories=["engineering", "backend"],
        tags=["mcp", "typescript", "server"],
        relevant_project_types=["api", "library"],
        tech_keywords=["TypeScript", "MCP"],
        priority=2,
    ),
    AgentEntry(
        id="python-mcp-expert",
        name="Python MCP Expert",
        description="Python MCP server development specialist",
        categories=["engineering", "backend"],
        tags=["mcp", "python", "server"],
        relevant_project_types=["api", "data-science"],
        tech_keywords=["Python", "MCP"],
        priority=3,
    ),
    # Cloud/Azure
    AgentEntry(
        id="azure-principal-architect",
        name="Azure Principal Architect",
        description="Azure cloud architecture and best practices",
        categories=["cloud", "architecture"],
        tags=["azure", "cloud", "architecture", "well-architected"],
        relevant_project_types=["devops", "api", "web-app"],
        tech_keywords=["Azure"],
        priority=2,
    ),
    # Data
    AgentEntry(
        id="ms-sql-dba",
        name="MS SQL DBA",
        description="Microsoft SQL Server database administration",
        categories=["data"],
        tags=["sql", "database", "mssql", "dba"],
        relevant_project_types=["api", "data-science"],
        tech_keywords=["SQL Server", "MSSQL"],
        priority=3,
    ),
    AgentEntry(
        id="postgresql-dba",
        name="PostgreSQL DBA",
        description="PostgreSQL database administration and optimization",
        categories=["data"],
        tags=["postgresql", "database", "optimization"],
        relevant_project_types=["api", "data-science"],
        tech_keywords=["PostgreSQL"],
        priority=3,
    ),
    # Frontend Frameworks
    AgentEntry(
        id="electron-angular-native",
        name="Electron Angular Native",
        description="Electron with Angular desktop application development",
        categories=["frontend", "engineering"],
        tags=["electron", "angular", "desktop"],
        relevant_project_types=["web-app"],
        tech_keywords=["Electron", "Angular"],
        priority=3,
    ),
    # Mobile
    AgentEntry(
        id="dotnet-maui",
        name=".NET MAUI",
        description=".NET MAUI cross-platform mobile/desktop development",
        categories=["mobile", "engineering"],
        tags=["maui", "dotnet", "mobile", "cross-platform"],
        relevant_project_types=["mobile"],
        tech_keywords=[".NET", "MAUI"],
        priority=2,
    ),
    # Creative/Content
    AgentEntry(
        id="prd",
        name="PRD",
        description="Product Requirements Document generator",
        categories=["planning", "documentation"],
        tags=["prd", "requirements", "product"],
        relevant_project_types=["*"],
        tech_keywords=[],
        priority=2,
    ),
    AgentEntry(
        id="specification",
        name="Specification",
        description="Technical specification document generator",
        categories=["planning", "documentation"],
        tags=["specification", "requirements", "technical"],
        relevant_project_types=["*"],
        tech_keywords=[],
        priority=2,
    ),
    # Orchestration
    AgentEntry(
        id="gem-orchestrator",
        name="Orchestrator",
        description="Multi-agent workflow orchestration",
        categories=["meta"],
        tags=["orchestrator", "workflow", "multi-agent"],
        relevant_project_types=["*"],
        tech_keywords=[],
        priority=2,
    ),
    AgentEntry(
        id="gem-implementer",
        name="Implementer",
        description="Code implementation from plans",
        categories=["engineering"],
        tags=["implementation", "coding"],
        relevant_project_types=["*"],
        tech_keywords=[],
        priority=2,
    ),
    AgentEntry(
        id="gem-researcher",
        name="Researcher",
        description="Technical research and analysis",
        categories=["planning"],
        tags=["research", "analysis", "investigation"],
        relevant_project_types=["*"],
        tech_keywords=[],
        priority=2,
    ),
    # Beast Mode / Advanced
    AgentEntry(
        id="4.1-Beast",
        name="GPT-4.1 Beast Mode",
        description="Maximum performance agent with advanced reasoning and comprehensive capabilities",
        categories=["engineering", "meta"],
        tags=["beast-mode", "advanced", "comprehensive", "gpt-4.1"],
        relevant_project_types=["*"],
        tech_keywords=[],
        priority=3,
    ),
    AgentEntry(
        id="mentor",
        name="Mentor",
        description="Learning and mentorship guidance",
        categories=["documentation"],
        tags=["mentor", "learning", "guidance", "education"],
        relevant_project_types=["learning"],
        tech_keywords=[],
        priority=2,
    ),
    AgentEntry(
        id="janitor",
        name="Janitor",
        description="Code cleanup and maintenance",
        categories=["review"],
        tags=["cleanup", "maintenance", "refactor"],
        relevant_project_types=["*"],
        tech_keywords=[],
        priority=3,
    ),
)

# --- Skill Registry ---

SKILL_REGISTRY: Tuple[SkillEntry, ...] = (
    # Blueprint Generators
    SkillEntry(
        id="copilot-instructions-blueprint-generator",
        name="Copilot Instructions Blueprint",
        description="Technology-agnostic blueprint generator for copilot-instructions.md files",
        categories=["blueprint", "project-setup"],
        tags=["copilot", "instructions", "blueprint", "standards"],
        relevant_project_types=["*"],
        tech_keywords=[],
        has_resources=False,
        priority=1,
    ),
    SkillEntry(
        id="folder-structure-blueprint-generator",
        name="Folder Structure Blueprint",
        description="Analyzes and documents project folder structures with visualization",
        categories=["blueprint", "project-setup"],
        tags=["folder-structure", "blueprint", "visualization"],
        relevant_project_types=["*"],
        tech_keywords=[],
        has_resources=False,
        priority=1,
    ),
    SkillEntry(
        id="technology-stack-blueprint-generator",
        name="Technology Stack Blueprint",
        description="Analyzes codebases to create detailed technology stack documentation",
        categories=["blueprint", "analysis"],
        tags=["tech-stack", "blueprint", "analysis", "documentation"],
        relevant_project_types=["*"],
        tech_keywords=[],
        has_resources=False,
        priority=1,
    ),
    SkillEntry(
        id="architecture-blueprint-generator",
        name="Architecture Blueprint",
        description="Generates comprehensive architecture documentation",
        categories=["blueprint"],
        tags=["architecture", "blueprint", "documentation"],
        relevant_project_types=["*"],
        tech_keywords=[],
        has_resources=False,
        priority=1,
    ),
    SkillEntry(
        id="readme-blueprint-generator",
        name="README Blueprint",
        description="Generates comprehensive README documentation blueprints",
        categories=["blueprint", "document-gen"],
        tags=["readme", "blueprint", "documentation"],
        relevant_project_types=["*"],
        tech_keywords=[],
        has_resources=False,
        priority=2,
    ),
    SkillEntry(
        id="code-exemplars-blueprint-generator",
        name="Code Exemplars Blueprint",
        description="Generates code example blueprints for documentation",
        categories=["blueprint"],
        tags=["code-examples", "blueprint", "documentation"],
        relevant_project_types=["library"],
        tech_keywords=[],
        has_resources=False,
        priority=2,
    ),
    SkillEntry(
        id="project-workflow-analysis-blueprint-generator",
        name="Project Workflow Blueprint",
        description="Analyzes and documents project workflow patterns",
        categories=["blueprint", "analysis"],
        tags=["workflow", "blueprint", "analysis"],
        relevant_project_types=["*"],
        tech_keywords=[],
        has_resources=False,
        priority=2,
    ),
    # Document Generators
    SkillEntry(
        id="create-specification",
        name="Create Specification",
        description="Creates specification files optimized for AI consumption",
        categories=["document-gen"],
        tags=["specification", "requirements", "ai-optimized"],
        relevant_project_types=["*"],
        tech_keywords=[],
        has_resources=False,
        priority=1,
    ),
    SkillEntry(
        id="create-implementation-plan",
        name="Create Implementation Plan",
        description="Creates deterministic, machine-readable implementation plans",
        categories=["document-gen"],
        tags=["implementation", "planning", "tasks"],
        relevant_project_types=["*"],
        tech_keywords=[],
        has_resources=False,
        priority=1,
    ),
    SkillEntry(
        id="create-readme",
        name="Create README",
        description="Creates professional README.md files",
        categories=["document-gen"],
        tags=["readme", "documentation", "github"],
        relevant_project_types=["*"],
        tech_keywords=[],
        has_resources=False,
        priority=1,
    ),
    SkillEntry(
        id="create-agentsmd",
        name="Create AGENTS.md",
        description="Creates AGENTS.md, an open-format README for agents",
        categories=["document-gen", "project-setup"],
        tags=["agents.md", "agent-config", "documentation"],
        relevant_project_types=["*"],
        tech_keywords=[],
        has_resources=False,
        priority=1,
    ),
    SkillEntry(
        id="create-architectural-decision-record",
        name="Create ADR",
        description="Creates Architectural Decision Records for AI-optimized decision documentation",
        categories=["document-gen"],
        tags=["adr", "architecture", "decisions"],
        relevant_project_types=["*"],
        tech_keywords=[],
        has_resources=False,
        priority=1,
    ),
    SkillEntry(
        id="create-llms",
        name="Create LLMs.txt",
        description="Creates LLMs.txt file for AI context",
        categories=["document-gen", "project-setup"],
        tags=["llms.txt", "ai-context", "documentation"],
        relevant_project_types=["*"],
        tech_keywords=[],
        has_resources=False,
        priority=2,
    ),
    SkillEntry(
        id="prd",
        name="Product Requirements Document",
        description="Creates Product Requirements Documents (PRD)",
        categories=["document-gen"],
        tags=["prd", "requirements", "product"],
        relevant_project_types=["web-app", "api", "mobile"],
        tech_keywords=[],
        has_resources=False,
        priority=2,
    ),
    # Git & Workflow
    SkillEntry(
        id="conventional-commit",
        name="Conventional Commit",
        description="Generates standardized conventional commit messages",
        categories=["git"],
        tags=["commit", "conventional", "git", "workflow"],
        relevant_project_types=["*"],
        tech_keywords=[],
        has_resources=False,
        priority=1,
    ),
    SkillEntry(
        id="git-commit",
        name="Git Commit",
        description="Git commit message helper",
        categories=["git"],
        tags=["commit", "git"],
        relevant_project_types=["*"],
        tech_keywords=[],
        has_resources=False,
        priority=2,
    ),
    SkillEntry(
        id="git-flow-branch-creator",
        name="Git Flow Branch Creator",
        description="Creates branches following Git Flow naming conventions",
        categories=["git"],
        tags=["git-flow", "branching", "naming"],
        relevant_project_types=["*"],
        tech_keywords=[],
        has_resources=False,
        priority=2,
    ),
    # Code Generation
    SkillEntry(
        id="generate-custom-instructions-from-codebase",
        name="Generate Custom Instructions",
        description="Generates migration/evolution instructions by analyzing codebase differences",
        categories=["code-gen", "migration"],
        tags=["instructions", "migration", "evolution", "codebase-analysis"],
        relevant_project_types=["*"],
        tech_keywords=[],
        has_resources=False,
        priority=1,
    ),
    SkillEntry(
        id="typescript-mcp-server-generator",
        name="TypeScript MCP Server Generator",
        description="Generates TypeScript MCP server scaffolding",
        categories=["mcp", "code-gen"],
        tags=["mcp", "typescript", "server", "scaffolding"],
        relevant_project_types=["api", "library"],
        tech_keywords=["TypeScript", "MCP"],
        has_resources=False,
        priority=2,
    ),
    SkillEntry(
        id="python-mcp-server-generator",
        name="Python MCP Server Generator",
        description="Generates Python MCP server scaffolding",
        categories=["mcp", "code-gen"],
        tags=["mcp", "python", "server"],
        relevant_project_types=["api", "data-science"],
        tech_keywords=["Python", "MCP"],
        has_resources=False,
        priority=3,
    ),
    SkillEntry(
        id="create-spring-boot-java-project",
        name="Spring Boot Java Project",
        description="Creates Spring Boot Java project scaffolding",
        categories=["code-gen"],
        tags=["spring-boot", "java", "scaffolding"],
        relevant_project_types=["api", "web-app"],
        tech_keywords=["Java", "Spring Boot"],
        has_resources=False,
        priority=3,
    ),
    SkillEntry(
        id="create-spring-boot-kotlin-project",
        name="Spring Boot Kotlin Project",
        description="Creates Spring Boot Kotlin project scaffolding",
        categories=["code-gen"],
        tags=["spring-boot", "kotlin", "scaffolding"],
        relevant_project_types=["api"],
        tech_keywords=["Kotlin", "Spring Boot"],
        has_resources=False,
        priority=3,
    ),
    SkillEntry(
        id="create-web-form",
        name="Create Web Form",
        description="Generates web form components",
        categories=["code-gen"],
        tags=["form", "web", "components"],
        relevant_project_types=["web-app"],
        tech_keywords=["HTML", "CSS", "JavaScript"],
        has_resources=False,
        priority=3,
    ),
    # Testing
    SkillEntry(
        id="playwright-generate-test",
        name="Playwright Test Generator",
        description="Generates Playwright E2E test scenarios",
        categories=["testing"],
        tags=["playwright", "e2e", "test-generation"],
        relevant_project_types=["web-app"],
        tech_keywords=["Playwright", "TypeScript"],
        has_resources=False,
        priority=2,
    ),
    SkillEntry(
        id="polyglot-test-agent",
        name="Polyglot Test Agent",
        description="Multi-language test generation",
        categories=["testing"],
        tags=["testing", "polyglot", "multi-language"],
        relevant_project_types=["*"],
        tech_keywords=[],
        has_resources=True,
        priority=2,
    ),
    SkillEntry(
        id="pytest-coverage",
        name="Pytest Coverage",
        description="Python test coverage analysis with pytest",
        categories=["testing"],
        tags=["pytest", "coverage", "python"],
        relevant_project_types=["api", "data-science"],
        tech_keywords=["Python", "pytest"],
        has_resources=False,
        priority=3,
    ),
    SkillEntry(
        id="webapp-testing",
        name="Web App Testing",
        description="Web application testing strategy and execution",
        categories=["testing"],
        tags=["testing", "web", "strategy"],
        relevant_project_types=["web-app"],
        tech_keywords=[],
        has_resources=False,
        priority=2,
    ),
    # DevOps
    SkillEntry(
        id="multi-stage-dockerfile",
        name="Multi-Stage Dockerfile",
        description="Creates optimized multi-stage Dockerfiles",
        categories=["devops", "infrastructure"],
        tags=["docker", "dockerfile", "multi-stage", "optimization"],
        relevant_project_types=["devops", "api", "web-app"],
        tech_keywords=["Docker"],
        has_resources=False,
        priority=2,
    ),
    SkillEntry(
        id="devops-rollout-plan",
        name="DevOps Rollout Plan",
        description="Creates deployment rollout plans",
        categories=["devops"],
        tags=["deployment", "rollout", "planning"],
        relevant_project_types=["devops"],
        tech_keywords=[],
        has_resources=False,
        priority=2,
    ),
    SkillEntry(
        id="containerize-aspnetcore",
        name="Containerize ASP.NET Core",
        description="Containerizes ASP.NET Core applications",
        categories=["devops"],
        tags=["container", "docker", "aspnet"],
        relevant_project_types=["api", "web-app"],
        tech_keywords=["ASP.NET", ".NET", "Docker"],
        has_resources=False,
        priority=3,
    ),
    # Refactoring
    SkillEntry(
        id="refactor",
        name="Refactor",
        description="Code refactoring guidance and execution",
        categories=["refactor"],
        tags=["refactor", "code-quality", "improvement"],
        relevant_project_types=["*"],
        tech_keywords=[],
        has_resources=False,
        priority=1,
    ),
    SkillEntry(
        id="refactor-plan",
        name="Refactor Plan",
        description="Creates refactoring plans",
        categories=["refactor"],
        tags=["refactor", "planning", "strategy"],
        relevant_project_types=["*"],
        tech_keywords=[],
        has_resources=False,
        priority=2,
    ),
    # Analysis
    SkillEntry(
        id="context-map",
        name="Context Map",
        description="Creates context maps for codebases",
        categories=["analysis"],
        tags=["context", "mapping", "understanding"],
        relevant_project_types=["*"],
        tech_keywords=[],
        has_resources=False,
        priority=1,
    ),
    SkillEntry(
        id="what-context-needed",
        name="What Context Needed",
        description="Identifies what context is needed for a task",
        categories=["analysis"],
        tags=["context", "analysis", "planning"],
        relevant_project_types=["*"],
        tech_keywords=[],
        has_resources=False,
        priority=2,
    ),
    # Prompt Engineering
    SkillEntry(
        id="prompt-builder",
        name="Prompt Builder",
        description="Builds and optimizes prompts",
        categories=["prompt"],
        tags=["prompt", "optimization", "engineering"],
        relevant_project_types=["*"],
        tech_keywords=[],
        has_resources=False,
        priority=2,
    ),
    SkillEntry(
        id="boost-prompt",
        name="Boost Prompt",
        description="Enhances and improves existing prompts",
        categories=["prompt"],
        tags=["prompt", "enhancement", "improvement"],
        relevant_project_types=["*"],
        tech_keywords=[],
        has_resources=False,
        priority=3,
    ),
    # Project Setup
    SkillEntry(
        id="editorconfig",
        name="EditorConfig",
        description="Creates .editorconfig files for consistent coding styles",
        categories=["project-setup"],
        tags=["editorconfig", "coding-style", "consistency"],
        relevant_project_types=["*"],
        tech_keywords=[],
        has_resources=False,
        priority=1,
    ),
    SkillEntry(
        id="create-github-action-workflow-specification",
        name="GitHub Actions Workflow",
        description="Creates GitHub Actions workflow specifications",
        categories=["devops", "project-setup"],
        tags=["github-actions", "ci", "workflow"],
        relevant_project_types=["*"],
        tech_keywords=["GitHub Actions"],
        has_resources=False,
        priority=2,
    ),
    SkillEntry(
        id="finalize-agent-prompt",
        name="Finalize Agent Prompt",
        description="Finalizes and polishes agent prompt definitions",
        categories=["prompt", "project-setup"],
        tags=["agent", "prompt", "finalization"],
        relevant_project_types=["*"],
        tech_keywords=[],
        has_resources=False,
        priority=2,
    ),
    # Migration
    SkillEntry(
        id="dotnet-upgrade",
        name=".NET Upgrade",
        description=".NET framework/version upgrade assistance",
        categories=["migration"],
        tags=["dotnet", "upgrade", "migration"],
        relevant_project_types=["web-app", "api"],
        tech_keywords=[".NET", "C#"],
        has_resources=False,
        priority=3,
    ),
    # Platform Specific
    SkillEntry(
        id="excalidraw-diagram-generator",
        name="Excalidraw Diagram Generator",
        description="Generates Excalidraw diagrams with templates for various diagram types",
        categories=["document-gen"],
        tags=["excalidraw", "diagrams", "visualization"],
        relevant_project_types=["*"],
        tech_keywords=[],
        has_resources=True,
        priority=3,
    ),
    SkillEntry(
        id="aspire",
        name=".NET Aspire",
        description=".NET Aspire cloud-native application development",
        categories=["platform"],
        tags=["aspire", "dotnet", "cloud-native"],
        relevant_project_types=["api", "web-app"],
        tech_keywords=[".NET", "Aspire"],
        has_resources=True,
        priority=3,
    ),
)

_AGENTS_BY_ID: Dict[str, AgentEntry] = {a.id: a for a in AGENT_REGISTRY}
_SKILLS_BY_ID: Dict[str, SkillEntry] = {s.id: s for s in SKILL_REGISTRY}


def get_agent(agent_id: str) -> Optional[AgentEntry]:
    return _AGENTS_BY_ID.get(agent_id)


def get_skill(skill_id: str) -> Optional[SkillEntry]:
    return _SKILLS_BY_ID.get(skill_id)


def _select(kind: str, index: Dict, ids: Iterable[str]) -> list:
    ids = list(ids)
    missing = [i for i in ids if i not in index]
    if missing:
        logger.warning(f"Lookup of {kind} ids failed for: {missing}")
        raise UnknownCatalogEntryError(kind, missing)
    return [index[i] for i in ids]


def select_agents(agent_ids: Iterable[str]) -> List[AgentEntry]:
    """Returns the agents for the given ids, in the order they were requested."""
    return _select("agent", _AGENTS_BY_ID, agent_ids)


def select_skills(skill_ids: Iterable[str]) -> List[SkillEntry]:
    """Returns the skills for the given ids, in the order they were requested."""
    return _select("skill", _SKILLS_BY_ID, skill_ids)
