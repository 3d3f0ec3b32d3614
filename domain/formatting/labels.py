# domain/formatting/labels.py
import math
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union

from domain.models.context_package import KnowledgeType

TASK_TYPE_LABELS: Mapping[str, str] = MappingProxyType({
    "architecture": "Architecture Design",
    "feature": "Feature Development",
    "bugfix": "Bug Fix",
    "refactor": "Code Refactoring",
    "decision": "Decision Support",
    "progress": "Progress Management",
    "general": "General Task",
})

PRIORITY_LABELS: Mapping[str, str] = MappingProxyType({
    "high": "🔴 High",
    "medium": "🟡 Medium",
    "low": "🟢 Low",
})

OUTCOME_LABELS: Mapping[str, str] = MappingProxyType({
    "success": "✅ Success",
    "partial_success": "🟡 Partial Success",
    "failure": "❌ Failure",
    "unknown": "❓ Unknown",
})

KNOWLEDGE_TYPE_LABELS: Mapping[str, str] = MappingProxyType({
    KnowledgeType.PATTERN.value: "🔄 Patterns & Practices",
    KnowledgeType.SOLUTION.value: "💡 Solutions",
    KnowledgeType.BEST_PRACTICE.value: "⭐ Best Practices",
    KnowledgeType.EXAMPLE.value: "📝 Code Examples",
})

# Inclusive lower bounds, checked top-down
SCORE_BANDS = (
    (90, "excellent"),
    (80, "good"),
    (70, "fair"),
)
LOWEST_BAND = "needs improvement"

SCORE_MARKERS: Mapping[str, str] = MappingProxyType({
    "excellent": "🟢",
    "good": "🟡",
    "fair": "🟠",
    LOWEST_BAND: "🔴",
})

def _key(code: Union[str, Enum]) -> str:
    return code.value if isinstance(code, Enum) else code

def translate(code: Union[str, Enum], table: Mapping[str, str]) -> str:
    """Look up a display label, falling back to the code itself"""
    key = _key(code)
    return table.get(key, key)

def task_type_label(task_type: Union[str, Enum]) -> str:
    return translate(task_type, TASK_TYPE_LABELS)

def priority_label(priority: Union[str, Enum]) -> str:
    return translate(priority, PRIORITY_LABELS)

def outcome_label(outcome: Union[str, Enum]) -> str:
    return translate(outcome, OUTCOME_LABELS)

def knowledge_type_label(knowledge_type: Union[str, Enum]) -> str:
    key = _key(knowledge_type)
    if key in KNOWLEDGE_TYPE_LABELS:
        return KNOWLEDGE_TYPE_LABELS[key]
    return f"📄 {key}"

def score_band(score: float) -> str:
    for threshold, label in SCORE_BANDS:
        if score >= threshold:
            return label
    return LOWEST_BAND

def format_score(score: float) -> str:
    """Render a 0-100 score as e.g. '🟢 95/100 (excellent)'"""
    label = score_band(score)
    if isinstance(score, float) and score.is_integer():
        score = int(score)
    return f"{SCORE_MARKERS[label]} {score}/100 ({label})"

def relevance_percent(score: float) -> int:
    """Scale a 0.0-1.0 relevance score to a whole percentage, rounding half up"""
    return int(math.floor(score * 100 + 0.5))
