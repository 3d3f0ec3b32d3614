# application/orchestrators/context_turn_orchestrator.py
from dataclasses import replace
from datetime import datetime
from typing import Optional, Tuple

from domain.models.context_package import ContextPackage
from domain.models.search_results import PreparedContext
from application.services.context_formatter import ContextPackageFormatter, SECTION_SEPARATOR
from application.services.instruction_builder import system_instructions
from application.services.quality_assessor import assess_completeness
from application.services.search_query_builder import derive_search_queries
from shared.logging import log_context_assembly, log_search_queries

class ContextTurnOrchestrator:
    """Prepare everything an agent turn consumes from one context package"""

    def __init__(self, formatter: Optional[ContextPackageFormatter] = None):
        self.formatter = formatter or ContextPackageFormatter()

    def complete(self, package: ContextPackage) -> ContextPackage:
        """Fill in instructions, score and suggestions the caller left empty"""
        if not package.system_instructions:
            package = replace(package, system_instructions=system_instructions(package.task_type))

        # Assessed after instructions are filled in, since they count toward the score
        if package.completeness_score is None or not package.optimization_suggestions:
            assessment = assess_completeness(package)
            updates = {}
            if package.completeness_score is None:
                updates["completeness_score"] = assessment.score
            if not package.optimization_suggestions:
                updates["optimization_suggestions"] = assessment.optimization_suggestions
            package = replace(package, **updates)

        return package

    def assemble(self, package: ContextPackage, now: Optional[datetime] = None) -> Tuple[str, int]:
        """Render the completed package; returns the document and its section count"""
        package = self.complete(package)
        sections = self.formatter.render_sections(package, now)
        document = SECTION_SEPARATOR.join(sections)

        log_context_assembly(
            session_id=package.session_id,
            task_type=getattr(package.task_type, "value", package.task_type),
            section_count=len(sections),
            document_length=len(document)
        )

        return document, len(sections)

    def prepare(self, package: ContextPackage, now: Optional[datetime] = None) -> PreparedContext:
        document, _ = self.assemble(package, now)
        search_queries = derive_search_queries(package.task_type, package.user_input)

        log_search_queries(
            task_type=getattr(package.task_type, "value", package.task_type),
            library_terms=search_queries.library_search,
            code_query=search_queries.code_search
        )

        return PreparedContext(document=document, search_queries=search_queries)
