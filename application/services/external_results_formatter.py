# application/services/external_results_formatter.py
from typing import List, Optional, Sequence

from domain.models.search_results import WebSearchResult, CodeSearchResult, LibraryDocResult
from domain.models.formatting_limits import FormattingLimits
from domain.formatting.summarizer import summarize
from domain.formatting.grouping import cap_list
from domain.formatting.labels import relevance_percent
from application.services.context_formatter import SECTION_SEPARATOR

def format_web_results(results: Sequence[WebSearchResult], limits: FormattingLimits) -> str:
    section = "## 🌐 Web Search Results"

    for index, result in enumerate(cap_list(results, limits.external_results), start=1):
        score = result.relevance_score if result.relevance_score is not None else limits.default_web_relevance
        section += f"\n\n**{index}. {result.title}**"
        section += f"\n• Source: {result.url}"
        section += f"\n• Summary: {summarize(result.snippet, limits.web_snippet_length)}"
        section += f"\n• Relevance: {relevance_percent(score)}%"

    return section

def format_code_results(results: Sequence[CodeSearchResult], limits: FormattingLimits) -> str:
    section = "## 💻 Code Search Results"

    for index, result in enumerate(cap_list(results, limits.external_results), start=1):
        section += f"\n\n**{index}. {result.file_path}:{result.line_number}**"
        section += f"\n• Language: {result.language}"
        section += f"\n• Snippet: `{summarize(result.code, limits.code_snippet_length)}`"
        section += f"\n• Context: {summarize(result.context, limits.code_context_length)}"

    return section

def format_library_results(results: Sequence[LibraryDocResult], limits: FormattingLimits) -> str:
    section = "## 📚 Library Documentation Results"

    for index, result in enumerate(cap_list(results, limits.external_results), start=1):
        section += f"\n\n**{index}. {result.library} - {result.section}**"
        section += f"\n• Content: {summarize(result.content, limits.library_content_length)}"
        if result.examples:
            section += f"\n• Examples: {len(result.examples)} code examples"

    return section

def format_external_results(web_results: Optional[Sequence[WebSearchResult]] = None,
                            code_results: Optional[Sequence[CodeSearchResult]] = None,
                            library_results: Optional[Sequence[LibraryDocResult]] = None,
                            limits: Optional[FormattingLimits] = None) -> str:
    """Render whichever result lists are non-empty; empty lists get no section at all"""
    limits = limits or FormattingLimits()
    sections: List[str] = []

    if web_results:
        sections.append(format_web_results(web_results, limits))
    if code_results:
        sections.append(format_code_results(code_results, limits))
    if library_results:
        sections.append(format_library_results(library_results, limits))

    return SECTION_SEPARATOR.join(sections)
