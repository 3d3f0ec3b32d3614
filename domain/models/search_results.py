# domain/models/search_results.py
from dataclasses import dataclass, field
from typing import List, Optional

@dataclass(frozen=True)
class WebSearchResult:
    title: str
    url: str
    snippet: str
    relevance_score: Optional[float] = None

@dataclass(frozen=True)
class CodeSearchResult:
    file_path: str
    line_number: int
    language: str
    code: str
    context: str = ""

@dataclass(frozen=True)
class LibraryDocResult:
    library: str
    section: str
    content: str
    examples: List[str] = field(default_factory=list)

@dataclass(frozen=True)
class SearchQueries:
    """Lookup queries handed to the external retrieval collaborator"""
    web_search: str
    code_search: str
    library_search: List[str] = field(default_factory=list)

@dataclass(frozen=True)
class PreparedContext:
    """Everything an agent turn needs: the rendered document plus lookup queries"""
    document: str
    search_queries: SearchQueries
