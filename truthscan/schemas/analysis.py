from enum import Enum
from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel

from truthscan.config import settings


class ContentType(str, Enum):
    TEXT = "text"
    URL = "url"
    MEDIA = "media"


class Verdict(str, Enum):
    FALSE = "FALSE"
    MISLEADING = "MISLEADING"
    NEEDS_VERIFICATION = "NEEDS VERIFICATION"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class AnalysisRequest(_CamelModel):
    model_config = ConfigDict(frozen=True)

    content_type: ContentType = Field(
        validation_alias=AliasChoices("type", "contentType", "content_type")
    )
    content: str = Field(min_length=1)
    file_name: Optional[str] = None
    file_type: Optional[str] = None     # MIME type, e.g. "video/mp4"
    language_hint: Optional[str] = Field(
        None, validation_alias=AliasChoices("language", "languageHint", "language_hint")
    )


class DetectionMetric(_CamelModel):
    label: str
    score: int = Field(ge=0, le=100)


class SourceRef(_CamelModel):
    model_config = ConfigDict(frozen=True)

    name: str
    url: str
    credibility_note: str


class FactCheckResult(_CamelModel):
    claim: str
    verdict: Verdict
    explanation: str
    corrected_statement: Optional[str] = None   # only for FALSE / MISLEADING
    sources: List[SourceRef] = Field(default_factory=list, max_length=6)


class AnalysisResponse(_CamelModel):
    authenticity_score: int = Field(ge=0, le=100)
    detection_metrics: List[DetectionMetric]
    findings: List[str]
    recommendation: str
    analysis_time_seconds: float
    detected_language: Optional[str] = None
    fact_check: Optional[FactCheckResult] = None
    short_id: Optional[str] = None

    @computed_field(alias="isAuthentic")
    @property
    def is_authentic(self) -> bool:
        return self.authenticity_score >= settings.authentic_threshold

    @computed_field(alias="isWarning")
    @property
    def is_warning(self) -> bool:
        return settings.warning_threshold <= self.authenticity_score < settings.authentic_threshold

    @computed_field(alias="analysisTime")
    @property
    def analysis_time(self) -> str:
        return f"{self.analysis_time_seconds:.1f}s"


class ContentAssessment(BaseModel):
    """Gemini structured output schema — content or URL credibility analysis."""
    score: float = Field(description="Number between 0 and 100, where 100 is completely authentic")
    findings: List[str] = Field(description="Exactly 4 specific findings")
    recommendation: str = Field(description="Detailed, actionable recommendation")


class FactCheckAssessment(BaseModel):
    """Gemini structured output schema — single-claim fact check."""
    claim: str = Field(description="Main claim extracted from the content")
    verdict: str = Field(description='One of "FALSE", "MISLEADING", "NEEDS VERIFICATION"')
    explanation: str = Field(description="Explanation referencing official sources")
    corrected_statement: Optional[str] = Field(
        None, description="The correct, factual statement when the claim is FALSE or MISLEADING"
    )
