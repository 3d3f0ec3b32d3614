# application/services/quality_assessor.py
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping

from domain.models.context_package import ContextPackage, ProjectContext, TaskType
from domain.models.quality_assessment import CompletenessAssessment

# Points per satisfied element; the total is capped at 100
SYSTEM_INSTRUCTIONS_POINTS = 15
USER_INPUT_POINTS = 20
MIN_USER_INPUT_LENGTH = 10
PROJECT_CONTEXT_MAX_POINTS = 25
PROJECT_CONTEXT_SUFFICIENT = 15
KNOWLEDGE_POINTS = 15
TOOLS_POINTS = 15
TASK_REQUIREMENTS_POINTS = 8
MAX_SCORE = 100

MISSING_GOALS = "project goals and value proposition"
MISSING_ARCHITECTURE = "technical architecture and stack information"
MISSING_KNOWLEDGE = "relevant technical documentation or best practices"
MISSING_HISTORY = "historical context and conversation records"

TASK_OPTIMIZATIONS: Mapping[str, str] = MappingProxyType({
    TaskType.ARCHITECTURE.value: "Collect more architecture decision history and technology selection details",
    TaskType.FEATURE.value: "Clarify the feature requirements and acceptance criteria",
    TaskType.BUGFIX.value: "Collect error logs and reproduction steps",
})

def project_context_points(project: ProjectContext) -> int:
    points = 0
    if project.goals:
        points += 5
    if project.key_features:
        points += 5
    if project.architecture:
        points += 5
    if project.current_focus:
        points += 3
    if project.recent_changes:
        points += 3
    return points

def identify_missing_information(package: ContextPackage) -> List[str]:
    missing = []
    if not package.project_context.goals:
        missing.append(MISSING_GOALS)
    if not package.project_context.architecture:
        missing.append(MISSING_ARCHITECTURE)
    if not package.relevant_knowledge:
        missing.append(MISSING_KNOWLEDGE)
    if not package.short_term_memory:
        missing.append(MISSING_HISTORY)
    return missing

def generate_optimization_suggestions(package: ContextPackage, missing_information: List[str]) -> List[str]:
    """Suggestions in first-seen order with duplicates removed"""
    suggestions = [f"Add {missing} to improve context completeness" for missing in missing_information]

    task_key = package.task_type.value if isinstance(package.task_type, Enum) else package.task_type
    if task_key in TASK_OPTIMIZATIONS:
        suggestions.append(TASK_OPTIMIZATIONS[task_key])

    if not package.relevant_knowledge:
        suggestions.append("Gather relevant technical information through web search or documentation lookup")
    if not package.short_term_memory:
        suggestions.append("Keep a conversation history to maintain context continuity")

    return list(dict.fromkeys(suggestions))

def assess_completeness(package: ContextPackage) -> CompletenessAssessment:
    """Score how completely the package covers what the task needs"""
    score = 0
    details = []

    if package.system_instructions:
        score += SYSTEM_INSTRUCTIONS_POINTS
        details.append("✓ System instructions provided")
    else:
        details.append("✗ System instructions missing")

    if len(package.user_input.strip()) > MIN_USER_INPUT_LENGTH:
        score += USER_INPUT_POINTS
        details.append("✓ User input is clear")
    else:
        details.append("✗ User input is too short or unclear")

    project_points = project_context_points(package.project_context)
    score += min(project_points, PROJECT_CONTEXT_MAX_POINTS)
    if project_points > PROJECT_CONTEXT_SUFFICIENT:
        details.append("✓ Project context is sufficient")
    else:
        details.append("✗ Project context is insufficient")

    if package.relevant_knowledge:
        score += KNOWLEDGE_POINTS
        details.append(f"✓ {len(package.relevant_knowledge)} relevant knowledge items provided")
    else:
        details.append("✗ Relevant knowledge and references missing")

    if package.available_tools:
        score += TOOLS_POINTS
        details.append(f"✓ {len(package.available_tools)} tools available")
    else:
        details.append("✗ No tool support")

    score += TASK_REQUIREMENTS_POINTS

    missing_information = identify_missing_information(package)
    return CompletenessAssessment(
        score=min(score, MAX_SCORE),
        details=details,
        missing_information=missing_information,
        optimization_suggestions=generate_optimization_suggestions(package, missing_information)
    )
