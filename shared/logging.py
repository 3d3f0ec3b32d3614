# shared/logging.py
import structlog
import logging
import sys
from typing import Any, List

def _configure_structlog(renderer: Any):
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

# JSON by default; main.py may switch to the console renderer
_configure_structlog(structlog.processors.JSONRenderer())

logger = structlog.get_logger("context_engine")

logging.basicConfig(
    format="%(message)s",
    stream=sys.stdout,
    level=logging.INFO,
)

def setup_logging(level: str = "INFO", json_logs: bool = True):
    """Setup logging configuration"""
    logging.getLogger().setLevel(getattr(logging, level.upper(), logging.INFO))

    if not json_logs:
        _configure_structlog(structlog.dev.ConsoleRenderer())

def log_context_assembly(
    session_id: str,
    task_type: str,
    section_count: int,
    document_length: int
):
    """Log a rendered context package"""
    logger.info("Context package assembled",
               session_id=session_id,
               task_type=task_type,
               section_count=section_count,
               document_length=document_length)

def log_search_queries(
    task_type: str,
    library_terms: List[str],
    code_query: str
):
    """Log derived external lookup queries"""
    logger.info("Search queries derived",
               task_type=task_type,
               library_terms=library_terms,
               library_term_count=len(library_terms),
               code_query=code_query)

def log_external_results(
    web_count: int,
    code_count: int,
    library_count: int,
    document_length: int
):
    """Log formatting of external search results"""
    logger.info("External results formatted",
               web_count=web_count,
               code_count=code_count,
               library_count=library_count,
               document_length=document_length)
