# domain/models/quality_assessment.py
from dataclasses import dataclass, field
from typing import List

@dataclass(frozen=True)
class CompletenessAssessment:
    """Rule-based completeness verdict for one context package"""
    score: int
    details: List[str] = field(default_factory=list)
    missing_information: List[str] = field(default_factory=list)
    optimization_suggestions: List[str] = field(default_factory=list)
