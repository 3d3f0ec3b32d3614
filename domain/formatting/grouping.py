# domain/formatting/grouping.py
from typing import Callable, Dict, Iterable, List, Optional, Sequence, TypeVar
from domain.models.context_package import ConversationHistory, Outcome

T = TypeVar("T")

DEFAULT_GROUP = "general"

RELEVANT_OUTCOMES = frozenset({Outcome.SUCCESS.value, Outcome.PARTIAL_SUCCESS.value})

def group_by(items: Iterable[T], key_fn: Callable[[T], Optional[str]]) -> Dict[str, List[T]]:
    """Group items by key, keeping first-seen key order and item order.

    Items whose key is missing or empty land in the "general" group.
    """
    groups: Dict[str, List[T]] = {}
    for item in items:
        key = key_fn(item) or DEFAULT_GROUP
        groups.setdefault(key, []).append(item)
    return groups

def cap_list(items: Sequence[T], n: int) -> List[T]:
    # Presentation order is the caller's order; never re-sorted here
    return list(items[:max(n, 0)])

def filter_and_cap_history(history: Iterable[ConversationHistory],
                           allowed_outcomes: Iterable[str] = RELEVANT_OUTCOMES,
                           cap: int = 2) -> List[ConversationHistory]:
    allowed = {getattr(outcome, "value", outcome) for outcome in allowed_outcomes}
    relevant = [entry for entry in history if entry.outcome in allowed]
    return cap_list(relevant, cap)
