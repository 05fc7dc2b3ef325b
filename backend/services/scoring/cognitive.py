"""Cognitive mapper: re-project the five category scores onto five cognitive dimensions.

Pure re-projection for the spider chart; no new information is added.
"""

from models.schemas.cognitive import CognitiveDimensions, CognitiveRiskMap
from models.schemas.llm_analysis import LLMAnalysis
from services.scoring.rules import round_to

COGNITIVE_VERSION = "v0.1"

DIMENSION_LABELS = {
    "analytical_reasoning": "Analytical Reasoning",
    "communication_clarity": "Communication Clarity",
    "technical_depth": "Technical Depth",
    "adaptability": "Adaptability",
    "problem_structuring": "Problem Structuring",
}


def compute_cognitive_risk_map(analysis: LLMAnalysis) -> CognitiveRiskMap:
    s = analysis.category_scores

    dimensions = {
        "analytical_reasoning": round_to(s.evidence_depth * 0.6 + s.hard_match * 0.4),
        "communication_clarity": round_to(s.clarity),
        "technical_depth": round_to(s.hard_match * 0.7 + s.evidence_depth * 0.3),
        "adaptability": round_to(s.company_proxy * 0.5 + s.round_readiness * 0.3 + s.clarity * 0.2),
        "problem_structuring": round_to(s.clarity * 0.4 + s.round_readiness * 0.4 + s.evidence_depth * 0.2),
    }

    # sorted() is stable, so ties keep declaration order
    ranked = sorted(dimensions.items(), key=lambda item: item[1])

    return CognitiveRiskMap(
        dimensions=CognitiveDimensions(**dimensions),
        lowest_dimension=DIMENSION_LABELS[ranked[0][0]],
        highest_dimension=DIMENSION_LABELS[ranked[-1][0]],
        version=COGNITIVE_VERSION,
    )
