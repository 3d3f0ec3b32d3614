"""
Context Package Engine v1.0 - Bounded Context Assembly for LLM Agents

Turns project, user, memory and retrieval data into one prioritized,
size-bounded markdown document, and derives lookup queries from a task.

Features:
- Immutable context models with open enum-like codes
- Fixed-order section formatters with caps, truncation and placeholders
- Web, code and library search query derivation
- External search result formatting
- Thin FastAPI surface with boundary validation and structured logging
"""

__version__ = "1.0.0"
__author__ = "Context Engine Team"
