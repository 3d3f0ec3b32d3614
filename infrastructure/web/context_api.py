# infrastructure/web/context_api.py
from fastapi import APIRouter, HTTPException, Depends

from domain.models.context_requests import (
    FormatContextRequest,
    FormatContextResponse,
    PrepareContextResponse,
    SearchQueryRequest,
    SearchQueryResponse,
    ExternalResultsRequest,
    ExternalResultsResponse
)
from application.services.context_formatter import ContextPackageFormatter
from application.services.search_query_builder import derive_search_queries, file_search_patterns
from application.services.external_results_formatter import format_external_results
from application.orchestrators.context_turn_orchestrator import ContextTurnOrchestrator
from shared.logging import logger, log_search_queries, log_external_results

router = APIRouter(prefix="/context", tags=["context-engine"])

_formatter = ContextPackageFormatter()
_orchestrator = ContextTurnOrchestrator(_formatter)

# Dependency injection functions
def get_formatter() -> ContextPackageFormatter:
    return _formatter

def get_orchestrator() -> ContextTurnOrchestrator:
    return _orchestrator

@router.post("/format", response_model=FormatContextResponse)
def format_context(
    request: FormatContextRequest,
    orchestrator: ContextTurnOrchestrator = Depends(get_orchestrator)
):
    """Render a context package into the markdown document"""

    try:
        document, section_count = orchestrator.assemble(request.package.to_domain(), request.now)

        return FormatContextResponse(document=document, section_count=section_count)

    except Exception as e:
        logger.error("Failed to format context package",
                    session_id=request.package.session_id,
                    error=str(e))
        raise HTTPException(status_code=500, detail=f"Failed to format context package: {str(e)}")

@router.post("/prepare", response_model=PrepareContextResponse)
def prepare_context(
    request: FormatContextRequest,
    orchestrator: ContextTurnOrchestrator = Depends(get_orchestrator)
):
    """Render the document and derive lookup queries for one agent turn"""

    try:
        package = request.package.to_domain()
        prepared = orchestrator.prepare(package, request.now)
        queries = prepared.search_queries

        return PrepareContextResponse(
            document=prepared.document,
            search_queries=SearchQueryResponse(
                web_search=queries.web_search,
                code_search=queries.code_search,
                library_search=queries.library_search,
                file_patterns=file_search_patterns(package.task_type)
            )
        )

    except Exception as e:
        logger.error("Failed to prepare context",
                    session_id=request.package.session_id,
                    error=str(e))
        raise HTTPException(status_code=500, detail=f"Failed to prepare context: {str(e)}")

@router.post("/search-queries", response_model=SearchQueryResponse)
def search_queries(request: SearchQueryRequest):
    """Derive web, code and library lookups from a task description"""

    try:
        queries = derive_search_queries(request.task_type, request.user_input)

        log_search_queries(
            task_type=request.task_type,
            library_terms=queries.library_search,
            code_query=queries.code_search
        )

        return SearchQueryResponse(
            web_search=queries.web_search,
            code_search=queries.code_search,
            library_search=queries.library_search,
            file_patterns=file_search_patterns(request.task_type)
        )

    except Exception as e:
        logger.error("Failed to derive search queries", task_type=request.task_type, error=str(e))
        raise HTTPException(status_code=500, detail=f"Failed to derive search queries: {str(e)}")

@router.post("/external-results", response_model=ExternalResultsResponse)
def external_results(
    request: ExternalResultsRequest,
    formatter: ContextPackageFormatter = Depends(get_formatter)
):
    """Render results returned by the external retrieval collaborator"""

    try:
        web_results, code_results, library_results = request.to_domain()
        document = format_external_results(web_results, code_results, library_results, formatter.limits)

        log_external_results(
            web_count=len(web_results),
            code_count=len(code_results),
            library_count=len(library_results),
            document_length=len(document)
        )

        return ExternalResultsResponse(document=document)

    except Exception as e:
        logger.error("Failed to format external results", error=str(e))
        raise HTTPException(status_code=500, detail=f"Failed to format external results: {str(e)}")
