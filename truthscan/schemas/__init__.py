from truthscan.schemas.analysis import (
    AnalysisRequest,
    AnalysisResponse,
    ContentAssessment,
    ContentType,
    DetectionMetric,
    FactCheckAssessment,
    FactCheckResult,
    SourceRef,
    Verdict,
)

__all__ = [
    "AnalysisRequest",
    "AnalysisResponse",
    "ContentAssessment",
    "ContentType",
    "DetectionMetric",
    "FactCheckAssessment",
    "FactCheckResult",
    "SourceRef",
    "Verdict",
]
