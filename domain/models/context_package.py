# domain/models/context_package.py
from dataclasses import dataclass, field
from typing import List, Optional
from enum import Enum

class TaskType(str, Enum):
    ARCHITECTURE = "architecture"
    FEATURE = "feature"
    BUGFIX = "bugfix"
    REFACTOR = "refactor"
    DECISION = "decision"
    PROGRESS = "progress"
    GENERAL = "general"

class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

class Outcome(str, Enum):
    SUCCESS = "success"
    PARTIAL_SUCCESS = "partial_success"
    FAILURE = "failure"
    UNKNOWN = "unknown"

class KnowledgeType(str, Enum):
    PATTERN = "pattern"
    SOLUTION = "solution"
    BEST_PRACTICE = "best-practice"
    EXAMPLE = "example"

@dataclass(frozen=True)
class ProjectContext:
    """Immutable snapshot of the project's product and activity context"""
    goals: List[str] = field(default_factory=list)
    key_features: List[str] = field(default_factory=list)
    architecture: str = ""
    current_focus: List[str] = field(default_factory=list)
    recent_changes: List[str] = field(default_factory=list)
    open_issues: List[str] = field(default_factory=list)

@dataclass(frozen=True)
class CodingStyle:
    languages: List[str] = field(default_factory=list)
    frameworks: List[str] = field(default_factory=list)
    code_verbosity: str = "standard"
    documentation_level: str = "standard"

@dataclass(frozen=True)
class CommunicationStyle:
    response_length: str = "standard"
    technical_detail: str = "medium"
    example_preference: str = "balanced"

@dataclass(frozen=True)
class LearningProgress:
    success_patterns: List[str] = field(default_factory=list)
    mastered_concepts: List[str] = field(default_factory=list)

@dataclass(frozen=True)
class UserPreferences:
    """Long-term memory; every block is optional and omitted when absent"""
    coding_style: Optional[CodingStyle] = None
    communication_style: Optional[CommunicationStyle] = None
    learning_progress: Optional[LearningProgress] = None

@dataclass(frozen=True)
class KnowledgeItem:
    title: str
    description: str
    type: Optional[str] = None
    relevance_score: float = 0.0

@dataclass(frozen=True)
class CodePattern:
    name: str
    category: str
    description: str
    use_case: str
    benefits: List[str] = field(default_factory=list)

@dataclass(frozen=True)
class ConversationHistory:
    """One short-term memory entry; only the number of actions is ever shown"""
    timestamp: str
    user_input: str
    outcome: str = Outcome.UNKNOWN.value
    actions: List[str] = field(default_factory=list)

@dataclass(frozen=True)
class ToolDescriptor:
    name: str
    description: str
    capabilities: List[str] = field(default_factory=list)
    recommended_use: List[str] = field(default_factory=list)

@dataclass(frozen=True)
class ContextPackage:
    """Immutable aggregate compiled for one agent turn; a None score is assessed on demand"""
    task_type: str
    priority: str
    completeness_score: Optional[float]
    session_id: str
    timestamp: str
    user_input: str
    system_instructions: List[str] = field(default_factory=list)
    project_context: ProjectContext = field(default_factory=ProjectContext)
    long_term_memory: UserPreferences = field(default_factory=UserPreferences)
    relevant_knowledge: List[KnowledgeItem] = field(default_factory=list)
    related_patterns: List[CodePattern] = field(default_factory=list)
    available_tools: List[ToolDescriptor] = field(default_factory=list)
    short_term_memory: List[ConversationHistory] = field(default_factory=list)
    feasibility_assessment: Optional[str] = None
    optimization_suggestions: List[str] = field(default_factory=list)
