"""
Identification Package: genus identification from sparse field observations.

Lazy exports to avoid import cycles with mycoid.data (the rule tables import
models from here).
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import IdentificationResult, Candidate, CandidateScore, ConfidenceLevel, EvidenceTier, FeatureRule  # pragma: no cover
    from .service import IdentificationService, assemble_result  # pragma: no cover
    from .scorer import score_candidate, score_all_candidates, score_to_confidence  # pragma: no cover
    from .feature_inference import infer_features  # pragma: no cover
    from .safety import build_safety_assessment  # pragma: no cover

__all__ = [
    "IdentificationResult",
    "Candidate",
    "CandidateScore",
    "ConfidenceLevel",
    "EvidenceTier",
    "FeatureRule",
    "IdentificationService",
    "assemble_result",
    "get_identification_service",
    "score_candidate",
    "score_all_candidates",
    "score_to_confidence",
    "infer_features",
    "build_safety_assessment",
]


# Singleton instance
_identification_service_instance = None


def get_identification_service():
    """Get singleton instance of IdentificationService."""
    global _identification_service_instance
    if _identification_service_instance is None:
        from .service import IdentificationService
        _identification_service_instance = IdentificationService()
    return _identification_service_instance


def __getattr__(name: str):
    """Lazy imports for better startup performance."""
    if name in ("IdentificationResult", "Candidate", "CandidateScore", "ConfidenceLevel", "EvidenceTier", "FeatureRule"):
        from . import models as _models
        return getattr(_models, name)
    if name in ("IdentificationService", "assemble_result"):
        from . import service as _service
        return getattr(_service, name)
    if name in ("score_candidate", "score_all_candidates", "score_to_confidence"):
        from . import scorer as _scorer
        return getattr(_scorer, name)
    if name == "infer_features":
        from . import feature_inference as _fi
        return getattr(_fi, name)
    if name == "build_safety_assessment":
        from . import safety as _safety
        return getattr(_safety, name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
