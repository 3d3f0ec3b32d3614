# domain/models/formatting_limits.py
from dataclasses import dataclass

@dataclass(frozen=True)
class FormattingLimits:
    """Caps and truncation bounds applied while rendering a context package"""
    # Truncation bounds (characters)
    user_input_length: int = 200
    architecture_length: int = 150
    knowledge_description_length: int = 100
    history_input_length: int = 60

    # Project context caps
    goals: int = 3
    key_features: int = 5
    current_focus: int = 3
    recent_changes: int = 3
    open_issues: int = 3

    # User context caps
    success_patterns: int = 3
    mastered_concepts: int = 3

    # Retrieval caps
    knowledge_per_group: int = 3
    patterns: int = 3
    pattern_benefits: int = 2
    tool_capabilities: int = 3
    tool_recommended_use: int = 2
    history_entries: int = 2
    optimization_suggestions: int = 3

    # External search results
    external_results: int = 3
    web_snippet_length: int = 120
    code_snippet_length: int = 80
    code_context_length: int = 60
    library_content_length: int = 120
    default_web_relevance: float = 0.5
