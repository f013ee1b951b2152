# tests/conftest.py

import sys
from pathlib import Path

# Add the project root directory to the system path to ensure
# modules like 'common' and 'catalog' can be imported in tests.
# The project root is two levels up from this file (tests/conftest.py).
project_root = Path(__file__).parent.parent.resolve()
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from typing import AsyncIterator

import pytest
import pytest_asyncio
from fastmcp import Client

from catalog.models import RecommendationRequest
from common.config import Settings, get_settings


# --- Helper Functions ---

def make_request(**overrides) -> RecommendationRequest:
    """Builds a request with generous caps so ranking is not truncated unless asked."""
    fields = {"max_agents": 100, "max_skills": 100}
    fields.update(overrides)
    return RecommendationRequest(**fields)


# --- Fixtures ---

@pytest.fixture
def test_settings() -> Settings:
    """Settings with defaults only, independent of any .env file in the project root."""
    return Settings(_env_file=None)


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest_asyncio.fixture
async def catalog_client(test_settings) -> AsyncIterator[Client]:
    """Yields a FastMCP Client connected in-memory to the catalog tool server."""
    from tool_server import build_server

    server = build_server(test_settings)
    async with Client(server) as c:
        yield c
