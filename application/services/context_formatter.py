# application/services/context_formatter.py
from datetime import datetime, timezone
from typing import List, Optional

from domain.models.context_package import (
    ContextPackage,
    ProjectContext,
    UserPreferences,
    KnowledgeItem,
    CodePattern,
    ToolDescriptor,
    ConversationHistory
)
from domain.models.formatting_limits import FormattingLimits
from domain.formatting.summarizer import summarize, quote_user_input
from domain.formatting.labels import (
    task_type_label,
    priority_label,
    outcome_label,
    knowledge_type_label,
    format_score,
    relevance_percent
)
from domain.formatting.relative_time import relative_time, format_timestamp
from domain.formatting.grouping import group_by, cap_list, filter_and_cap_history, RELEVANT_OUTCOMES
from application.services.quality_assessor import assess_completeness

SECTION_SEPARATOR = "\n\n"

KNOWLEDGE_PLACEHOLDER = "*No relevant knowledge yet; consider searching for related information*"
PATTERNS_PLACEHOLDER = "*No related code patterns*"
TOOLS_PLACEHOLDER = "*No tools available*"
NEW_SESSION_PLACEHOLDER = "*This is a new conversation session*"
NO_PRECEDENT_PLACEHOLDER = "*No successful precedent in recent conversation history*"

def _bullets(items: List[str]) -> str:
    return "".join(f"\n• {item}" for item in items)

class ContextPackageFormatter:
    """Render a ContextPackage into a bounded markdown document"""

    def __init__(self, limits: Optional[FormattingLimits] = None):
        self.limits = limits or FormattingLimits()

    def assemble(self, package: ContextPackage, now: Optional[datetime] = None) -> str:
        """Run every section formatter in fixed order and join the non-blank fragments"""
        return SECTION_SEPARATOR.join(self.render_sections(package, now))

    def render_sections(self, package: ContextPackage, now: Optional[datetime] = None) -> List[str]:
        now = now or datetime.now(timezone.utc)

        sections = [
            self.format_header(package),
            self.format_task(package),
            self.format_project_context(package.project_context),
            self.format_user_context(package.long_term_memory),
            self.format_knowledge(package.relevant_knowledge),
            self.format_patterns(package.related_patterns),
            self.format_tools(package.available_tools),
            self.format_history(package.short_term_memory, now),
            self.format_quality(package),
        ]
        return [section for section in sections if section.strip()]

    def completeness(self, package: ContextPackage) -> float:
        if package.completeness_score is None:
            return assess_completeness(package).score
        return package.completeness_score

    def format_header(self, package: ContextPackage) -> str:
        return (
            "# 🎯 Dynamic Context Package\n"
            "\n"
            f"**Task Type**: {task_type_label(package.task_type)}\n"
            f"**Priority**: {priority_label(package.priority)}\n"
            f"**Context Quality**: {format_score(self.completeness(package))}\n"
            f"**Session ID**: {package.session_id}\n"
            f"**Generated At**: {format_timestamp(package.timestamp)}"
        )

    def format_task(self, package: ContextPackage) -> str:
        section = "## 📋 Task\n\n**User Request**:\n"
        section += quote_user_input(package.user_input, self.limits.user_input_length)
        section += "\n\n**System Instructions**:"

        for index, instruction in enumerate(package.system_instructions, start=1):
            section += f"\n{index}. {instruction}"

        return section

    def format_project_context(self, project: ProjectContext) -> str:
        limits = self.limits
        section = "## 🏗️ Project Context"

        if project.goals:
            section += "\n\n**🎯 Goals**:" + _bullets(cap_list(project.goals, limits.goals))

        if project.key_features:
            section += "\n\n**⚡ Key Features**:" + _bullets(cap_list(project.key_features, limits.key_features))

        if project.architecture:
            section += "\n\n**🔧 Architecture**:"
            section += f"\n{summarize(project.architecture, limits.architecture_length)}"

        if project.current_focus:
            section += "\n\n**🔥 Current Focus**:" + _bullets(cap_list(project.current_focus, limits.current_focus))

        if project.recent_changes:
            section += "\n\n**📈 Recent Changes**:" + _bullets(cap_list(project.recent_changes, limits.recent_changes))

        if project.open_issues:
            section += "\n\n**⚠️ Open Issues**:" + _bullets(cap_list(project.open_issues, limits.open_issues))

        return section

    def format_user_context(self, preferences: UserPreferences) -> str:
        section = "## 👤 User Preferences"

        coding = preferences.coding_style
        if coding is not None:
            section += "\n\n**💻 Coding Style**:"
            if coding.languages:
                section += f"\n• Languages: {', '.join(coding.languages)}"
            if coding.frameworks:
                section += f"\n• Frameworks: {', '.join(coding.frameworks)}"
            section += f"\n• Code verbosity: {coding.code_verbosity}"
            section += f"\n• Documentation level: {coding.documentation_level}"

        communication = preferences.communication_style
        if communication is not None:
            section += "\n\n**💬 Communication Style**:"
            section += f"\n• Response length: {communication.response_length}"
            section += f"\n• Technical detail: {communication.technical_detail}"
            section += f"\n• Example preference: {communication.example_preference}"

        learning = preferences.learning_progress
        if learning is not None:
            section += "\n\n**📚 Learning Progress**:"
            if learning.success_patterns:
                patterns = cap_list(learning.success_patterns, self.limits.success_patterns)
                section += f"\n• Success patterns: {', '.join(patterns)}"
            if learning.mastered_concepts:
                concepts = cap_list(learning.mastered_concepts, self.limits.mastered_concepts)
                section += f"\n• Mastered: {', '.join(concepts)}"

        return section

    def format_knowledge(self, knowledge: List[KnowledgeItem]) -> str:
        if not knowledge:
            return f"## 📚 Relevant Knowledge\n\n{KNOWLEDGE_PLACEHOLDER}"

        section = "## 📚 Relevant Knowledge"

        for knowledge_type, items in group_by(knowledge, lambda item: item.type).items():
            section += f"\n\n**{knowledge_type_label(knowledge_type)}**:"

            for item in cap_list(items, self.limits.knowledge_per_group):
                section += f"\n\n• **{item.title}** (relevance: {relevance_percent(item.relevance_score)}%)"
                section += f"\n  {summarize(item.description, self.limits.knowledge_description_length)}"

        return section

    def format_patterns(self, patterns: List[CodePattern]) -> str:
        if not patterns:
            return f"## 🔄 Code Patterns\n\n{PATTERNS_PLACEHOLDER}"

        section = "## 🔄 Code Patterns"

        for pattern in cap_list(patterns, self.limits.patterns):
            section += f"\n\n**{pattern.name}** ({pattern.category})"
            section += f"\n• Description: {pattern.description}"
            section += f"\n• Use case: {pattern.use_case}"
            if pattern.benefits:
                section += f"\n• Benefits: {', '.join(cap_list(pattern.benefits, self.limits.pattern_benefits))}"

        return section

    def format_tools(self, tools: List[ToolDescriptor]) -> str:
        if not tools:
            return f"## 🛠️ Available Tools\n\n{TOOLS_PLACEHOLDER}"

        section = "## 🛠️ Available Tools"

        # Every tool is listed; only the per-tool lists are capped
        for tool in tools:
            section += f"\n\n**{tool.name}**"
            section += f"\n• Purpose: {tool.description}"
            if tool.capabilities:
                section += f"\n• Capabilities: {', '.join(cap_list(tool.capabilities, self.limits.tool_capabilities))}"
            if tool.recommended_use:
                recommended = cap_list(tool.recommended_use, self.limits.tool_recommended_use)
                section += f"\n• Recommended use: {', '.join(recommended)}"

        return section

    def format_history(self, history: List[ConversationHistory], now: datetime) -> str:
        if not history:
            return f"## 📖 Conversation History\n\n{NEW_SESSION_PLACEHOLDER}"

        section = "## 📖 Conversation History"

        relevant = filter_and_cap_history(history, RELEVANT_OUTCOMES, self.limits.history_entries)
        if not relevant:
            return f"{section}\n\n{NO_PRECEDENT_PLACEHOLDER}"

        for index, entry in enumerate(relevant, start=1):
            section += f"\n\n**Conversation {index}** ({relative_time(entry.timestamp, now)})"
            section += f"\n• User: {summarize(entry.user_input, self.limits.history_input_length)}"
            section += f"\n• Outcome: {outcome_label(entry.outcome)}"
            if entry.actions:
                section += f"\n• Actions: {len(entry.actions)} executed"

        return section

    def format_quality(self, package: ContextPackage) -> str:
        section = "## 📊 Context Quality Assessment"
        section += f"\n\n**Completeness**: {format_score(self.completeness(package))}"

        if package.feasibility_assessment:
            section += f"\n\n**Feasibility**:\n{package.feasibility_assessment}"

        if package.optimization_suggestions:
            suggestions = cap_list(package.optimization_suggestions, self.limits.optimization_suggestions)
            section += "\n\n**Optimization Suggestions**:" + _bullets(suggestions)

        return section

def assemble_context_package(package: ContextPackage,
                             now: Optional[datetime] = None,
                             limits: Optional[FormattingLimits] = None) -> str:
    """Render a context package with a one-off formatter"""
    return ContextPackageFormatter(limits).assemble(package, now)
