# application/services/search_query_builder.py
import re
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, Union

from domain.models.search_results import SearchQueries

RECENCY_HINT = "2024"

TASK_SEARCH_KEYWORDS: Mapping[str, str] = MappingProxyType({
    "architecture": "software architecture design patterns",
    "feature": "implementation tutorial example",
    "bugfix": "fix solution debugging",
    "refactor": "refactoring best practices",
    "decision": "comparison pros cons",
    "progress": "project management tracking",
    "general": "programming development",
})

TECH_KEYWORDS = (
    "class", "function", "component", "service", "controller", "model",
    "interface", "type", "async", "await", "promise", "api", "http",
    "get", "post", "put", "delete",
)
TECH_KEYWORD_PATTERN = re.compile(r"\b(" + "|".join(TECH_KEYWORDS) + r")\b", re.IGNORECASE)

KNOWN_LIBRARIES = (
    "react", "vue", "angular", "express", "nestjs",
    "typescript", "javascript", "python", "node.js",
    "mongodb", "postgresql", "redis", "docker",
)

FILE_SEARCH_PATTERNS: Mapping[str, tuple] = MappingProxyType({
    "feature": ("*.component.*", "*.service.*", "*.controller.*"),
    "bugfix": ("*.test.*", "*.spec.*", "*.js", "*.ts"),
    "architecture": ("*.config.*", "package.json", "tsconfig.json"),
})
DEFAULT_FILE_PATTERNS = ("*.*",)

def _task_key(task_type: Union[str, Enum]) -> str:
    return task_type.value if isinstance(task_type, Enum) else task_type

def web_query(task_type: Union[str, Enum], user_input: str, recency_hint: str = RECENCY_HINT) -> str:
    """User input + task-specific keyword phrase + recency hint"""
    phrase = TASK_SEARCH_KEYWORDS.get(_task_key(task_type), TASK_SEARCH_KEYWORDS["general"])
    return f"{user_input} {phrase} {recency_hint}"

def extract_tech_keywords(user_input: str) -> List[str]:
    keywords: List[str] = []
    for match in TECH_KEYWORD_PATTERN.findall(user_input):
        keyword = match.lower()
        if keyword not in keywords:
            keywords.append(keyword)
    return keywords

def code_query(user_input: str) -> str:
    keywords = extract_tech_keywords(user_input)
    return " ".join(keywords) if keywords else user_input

def library_search_terms(user_input: str) -> List[str]:
    """Known libraries mentioned anywhere in the input, in table order"""
    lowered = user_input.lower()
    return [library for library in KNOWN_LIBRARIES if library in lowered]

def file_search_patterns(task_type: Union[str, Enum]) -> List[str]:
    return list(FILE_SEARCH_PATTERNS.get(_task_key(task_type), DEFAULT_FILE_PATTERNS))

def derive_search_queries(task_type: Union[str, Enum], user_input: str) -> SearchQueries:
    return SearchQueries(
        web_search=web_query(task_type, user_input),
        code_search=code_query(user_input),
        library_search=library_search_terms(user_input)
    )
