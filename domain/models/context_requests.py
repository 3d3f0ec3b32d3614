# domain/models/context_requests.py
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from domain.models.context_package import (
    ContextPackage,
    ProjectContext,
    UserPreferences,
    CodingStyle,
    CommunicationStyle,
    LearningProgress,
    KnowledgeItem,
    CodePattern,
    ConversationHistory,
    ToolDescriptor,
    TaskType,
    Priority,
    Outcome
)
from domain.models.search_results import WebSearchResult, CodeSearchResult, LibraryDocResult

# Pydantic models for API request/response.
# Enum-like fields stay open strings so unknown codes reach the label fallbacks.

class ProjectContextModel(BaseModel):
    goals: List[str] = []
    key_features: List[str] = []
    architecture: str = ""
    current_focus: List[str] = []
    recent_changes: List[str] = []
    open_issues: List[str] = []

    def to_domain(self) -> ProjectContext:
        return ProjectContext(
            goals=list(self.goals),
            key_features=list(self.key_features),
            architecture=self.architecture,
            current_focus=list(self.current_focus),
            recent_changes=list(self.recent_changes),
            open_issues=list(self.open_issues)
        )

class CodingStyleModel(BaseModel):
    languages: List[str] = []
    frameworks: List[str] = []
    code_verbosity: str = Field(default="standard", description="concise | standard | verbose")
    documentation_level: str = Field(default="standard", description="minimal | standard | comprehensive")

class CommunicationStyleModel(BaseModel):
    response_length: str = Field(default="standard", description="brief | standard | detailed")
    technical_detail: str = Field(default="medium", description="high | medium | low")
    example_preference: str = Field(default="balanced", description="code-heavy | balanced | explanation-heavy")

class LearningProgressModel(BaseModel):
    success_patterns: List[str] = []
    mastered_concepts: List[str] = []

class UserPreferencesModel(BaseModel):
    coding_style: Optional[CodingStyleModel] = None
    communication_style: Optional[CommunicationStyleModel] = None
    learning_progress: Optional[LearningProgressModel] = None

    def to_domain(self) -> UserPreferences:
        coding = self.coding_style
        communication = self.communication_style
        learning = self.learning_progress
        return UserPreferences(
            coding_style=CodingStyle(
                languages=list(coding.languages),
                frameworks=list(coding.frameworks),
                code_verbosity=coding.code_verbosity,
                documentation_level=coding.documentation_level
            ) if coding else None,
            communication_style=CommunicationStyle(
                response_length=communication.response_length,
                technical_detail=communication.technical_detail,
                example_preference=communication.example_preference
            ) if communication else None,
            learning_progress=LearningProgress(
                success_patterns=list(learning.success_patterns),
                mastered_concepts=list(learning.mastered_concepts)
            ) if learning else None
        )

class KnowledgeItemModel(BaseModel):
    title: str = Field(..., min_length=1)
    description: str = ""
    type: Optional[str] = Field(None, description="pattern | solution | best-practice | example | other")
    relevance_score: float = Field(default=0.0, ge=0.0, le=1.0)

class CodePatternModel(BaseModel):
    name: str = Field(..., min_length=1)
    category: str = ""
    description: str = ""
    use_case: str = ""
    benefits: List[str] = []

class ConversationHistoryModel(BaseModel):
    timestamp: str = Field(..., description="ISO 8601 timestamp")
    user_input: str = ""
    outcome: str = Field(default=Outcome.UNKNOWN.value, description="success | partial_success | failure | unknown")
    actions: List[str] = []

class ToolDescriptorModel(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = ""
    capabilities: List[str] = []
    recommended_use: List[str] = []

class ContextPackageModel(BaseModel):
    task_type: str = Field(..., min_length=1, description="One of " + ", ".join(t.value for t in TaskType))
    priority: str = Field(default=Priority.MEDIUM.value, description="high | medium | low")
    completeness_score: Optional[float] = Field(None, ge=0, le=100, description="Assessed from the package when omitted")
    session_id: str = Field(..., min_length=1)
    timestamp: str = Field(..., description="ISO 8601 generation time")
    user_input: str = ""
    system_instructions: List[str] = []
    project_context: ProjectContextModel = ProjectContextModel()
    long_term_memory: UserPreferencesModel = UserPreferencesModel()
    relevant_knowledge: List[KnowledgeItemModel] = []
    related_patterns: List[CodePatternModel] = []
    available_tools: List[ToolDescriptorModel] = []
    short_term_memory: List[ConversationHistoryModel] = []
    feasibility_assessment: Optional[str] = None
    optimization_suggestions: List[str] = []

    def to_domain(self) -> ContextPackage:
        return ContextPackage(
            task_type=self.task_type,
            priority=self.priority,
            completeness_score=self.completeness_score,
            session_id=self.session_id,
            timestamp=self.timestamp,
            user_input=self.user_input,
            system_instructions=list(self.system_instructions),
            project_context=self.project_context.to_domain(),
            long_term_memory=self.long_term_memory.to_domain(),
            relevant_knowledge=[KnowledgeItem(**item.model_dump()) for item in self.relevant_knowledge],
            related_patterns=[CodePattern(**pattern.model_dump()) for pattern in self.related_patterns],
            available_tools=[ToolDescriptor(**tool.model_dump()) for tool in self.available_tools],
            short_term_memory=[ConversationHistory(**entry.model_dump()) for entry in self.short_term_memory],
            feasibility_assessment=self.feasibility_assessment,
            optimization_suggestions=list(self.optimization_suggestions)
        )

class FormatContextRequest(BaseModel):
    package: ContextPackageModel
    now: Optional[datetime] = Field(None, description="Reference time for relative history timestamps")

class FormatContextResponse(BaseModel):
    document: str
    section_count: int

class SearchQueryRequest(BaseModel):
    task_type: str = Field(..., min_length=1)
    user_input: str = Field(..., description="Task description to derive lookups from")

class SearchQueryResponse(BaseModel):
    web_search: str
    code_search: str
    library_search: List[str]
    file_patterns: List[str]

class PrepareContextResponse(BaseModel):
    document: str
    search_queries: SearchQueryResponse

class WebSearchResultModel(BaseModel):
    title: str
    url: str
    snippet: str = ""
    relevance_score: Optional[float] = Field(None, ge=0.0, le=1.0)

class CodeSearchResultModel(BaseModel):
    file_path: str
    line_number: int = Field(..., ge=0)
    language: str = ""
    code: str = ""
    context: str = ""

class LibraryDocResultModel(BaseModel):
    library: str
    section: str = ""
    content: str = ""
    examples: List[str] = []

class ExternalResultsRequest(BaseModel):
    web_results: List[WebSearchResultModel] = []
    code_results: List[CodeSearchResultModel] = []
    library_results: List[LibraryDocResultModel] = []

    def to_domain(self):
        return (
            [WebSearchResult(**result.model_dump()) for result in self.web_results],
            [CodeSearchResult(**result.model_dump()) for result in self.code_results],
            [LibraryDocResult(**result.model_dump()) for result in self.library_results]
        )

class ExternalResultsResponse(BaseModel):
    document: str
