# catalog/scoring.py
"""
Relevance scoring and ranking for catalog entries.

A score is the sum of four independent signals:

- project type: +10 when the entry applies to every type ("*") or lists the
  requested type verbatim.
- tech stack: +5 for each tech keyword that is a case-insensitive substring
  of some stack item, or the other way round. A keyword counts once no matter
  how many stack items it matches.
- intent: +3 for each tag found inside the lower-cased user intent.
- priority: (4 - priority) * 2, added unconditionally.

Because the priority bonus is always at least 2, the ``score > 0`` filter in
:func:`rank_entries` never drops anything. Irrelevant entries sink to the
bottom of the list instead of disappearing.
"""

from typing import List, Sequence, TypeVar

from catalog.models import WILDCARD_PROJECT_TYPE, AgentEntry, RecommendationRequest, ScoredEntry, SkillEntry

PROJECT_TYPE_WEIGHT = 10
TECH_KEYWORD_WEIGHT = 5
INTENT_TAG_WEIGHT = 3
PRIORITY_WEIGHT = 2

EntryT = TypeVar("EntryT", AgentEntry, SkillEntry)


def priority_bonus(priority: int) -> int:
    return (4 - priority) * PRIORITY_WEIGHT


def _matches_project_type(entry: EntryT, project_type: str) -> bool:
    types = entry.relevant_project_types
    return WILDCARD_PROJECT_TYPE in types or project_type in types


def _matches_tech(keyword: str, tech_lower: Sequence[str]) -> bool:
    keyword = keyword.lower()
    # An empty stack item is a substring of every keyword.
    return any(t in keyword or keyword in t for t in tech_lower)


def score_entry(entry: EntryT, request: RecommendationRequest) -> int:
    """Computes the relevance score of one entry. Pure and order-independent."""
    score = 0

    if _matches_project_type(entry, request.project_type):
        score += PROJECT_TYPE_WEIGHT

    tech_lower = [t.lower() for t in request.tech_stack]
    for keyword in entry.tech_keywords:
        if _matches_tech(keyword, tech_lower):
            score += TECH_KEYWORD_WEIGHT

    # Tags are compared lower-cased as well; catalog tags are lower-case already.
    intent_lower = request.user_intent.lower()
    for tag in entry.tags:
        if tag.lower() in intent_lower:
            score += INTENT_TAG_WEIGHT

    score += priority_bonus(entry.priority)
    return score


def score_entries(entries: Sequence[EntryT], request: RecommendationRequest) -> List[ScoredEntry]:
    return [ScoredEntry(entry=e, score=score_entry(e, request)) for e in entries]


def rank_entries(entries: Sequence[EntryT], request: RecommendationRequest, limit: int) -> List[EntryT]:
    """
    Filters, sorts and truncates one catalog for a request.

    Keeps entries scoring above zero, orders them by descending score and
    returns the first ``limit``. ``sorted`` is stable, so equal scores keep
    their catalog declaration order.
    """
    scored = [s for s in score_entries(entries, request) if s.score > 0]
    ranked = sorted(scored, key=lambda s: s.score, reverse=True)
    return [s.entry for s in ranked[:limit]]
