"""Archetype classifier: map a category-score profile onto one of five candidate archetypes.

Rules are evaluated in order and the first match wins, so every profile
maps to exactly one archetype. Personalized tips and resume/JD facts only
enrich the narrative; they never change the tag or the confidence.
"""

from models.schemas.archetype import ArchetypeProfile, ArchetypeTag
from models.schemas.jd_extracted import ExtractedJD
from models.schemas.llm_analysis import CategoryScores, LLMAnalysis, RiskItem
from models.schemas.resume_extracted import ExtractedResume
from services.scoring.rules import clamp, first_match, pluralize, round_half_up, round_to

ARCHETYPE_VERSION = "v0.1"

MIN_PERSONALIZED_TIPS = 3

ARCHETYPE_DEFINITIONS: dict[str, dict] = {
    "technical_potential_low_polish": {
        "label": "Technical Potential, Low Polish",
        "description": (
            "Strong technical foundation but communication and presentation need work. "
            "Your skills are there, but interviewers may not see them clearly."
        ),
        "coaching_tips": [
            "Pick your strongest project and rehearse a 2-minute explanation using: Context → Challenge → Your Approach → Result → What You'd Do Differently",
            "Record yourself answering your top 3 likely interview questions, then watch back at 1.5x speed — note every filler word and vague phrase, and redo each one",
            'For each technical skill on your resume, prepare one concrete "proof story" with a specific metric or outcome you can cite in 30 seconds',
            "Structure every answer as: one-sentence thesis → supporting detail → so-what impact — practice until this framework feels natural",
        ],
    },
    "strong_theoretical_weak_execution": {
        "label": "Strong Theory, Weak Execution",
        "description": (
            "Good conceptual understanding but lacking concrete examples and demonstrable experience. "
            'Interviewers will want to see more "show" than "tell".'
        ),
        "coaching_tips": [
            "Take your best theoretical knowledge area and write a concrete walkthrough of how you'd apply it to a real problem from your past work — this becomes your go-to interview story",
            'For each resume bullet that says "worked on" or "contributed to", rewrite it as "I specifically did X which resulted in Y" — then rehearse those versions aloud',
            "Pick one small project you can build in a weekend that demonstrates your strongest skill with measurable output (e.g., a load test, a deployed API, a data pipeline)",
            'Quantify every achievement: if you don\'t have exact numbers, estimate conservatively and say "approximately" — vague impact is worse than approximate impact',
        ],
    },
    "resume_strong_system_weak": {
        "label": "Resume Strong, System Weak",
        "description": (
            "Impressive resume but may struggle with system design and architectural thinking. "
            "Great at individual contributions but needs to demonstrate bigger-picture thinking."
        ),
        "coaching_tips": [
            "Pick the largest system you've worked on, diagram its architecture from memory, then identify 3 scaling bottlenecks and how you'd address them — this is your system design anchor story",
            'For each project on your resume, prepare a 1-minute answer to "how would you scale this 10x?" covering data, compute, and network layers',
            "Practice drawing system diagrams while talking — start with boxes for major components, then add data flow arrows and label the trade-offs at each boundary",
            "Prepare to discuss one real trade-off you made (e.g., consistency vs. availability, monolith vs. microservice) with the reasoning behind your choice",
        ],
    },
    "balanced_but_unproven": {
        "label": "Balanced But Unproven",
        "description": (
            "Solid across all dimensions but no standout strengths. "
            "May need to differentiate yourself more clearly to stand out from other candidates."
        ),
        "coaching_tips": [
            "Review your resume and pick the one project where you had the most ownership — prepare a deep 5-minute narrative around the decisions you made and trade-offs you navigated",
            'Identify one skill where you can credibly claim top-10% expertise and prepare a "signature story" that proves it with specifics no other candidate would have',
            'For your top 3 experiences, prepare answers to "what would you do differently?" — this shows self-awareness that balanced candidates often lack',
            'Create a 30-second "unique value pitch" that answers: what can you do that most candidates at your level cannot? Lead with this in your intro',
        ],
    },
    "high_ceiling_low_volume_practice": {
        "label": "High Ceiling, Low Practice Volume",
        "description": (
            "Clear potential for excellence but needs more interview practice. "
            "Natural ability is evident but execution under pressure may be inconsistent."
        ),
        "coaching_tips": [
            "Record yourself answering 3 questions from your weakest area, review them same-day, and redo each one — self-correction builds faster than volume alone",
            "Do 3 timed practice sessions this week: set a phone timer for the actual interview length and practice answering without pausing or restarting",
            'After each practice answer, write down the one thing you\'d change — accumulate these into a personal "anti-pattern" list to review before the real interview',
            "Practice your opening 90 seconds (self-intro + why this role) until you can deliver it smoothly without thinking — first impressions are disproportionately weighted",
        ],
    },
}


def has_practice_risk(risks: list[RiskItem]) -> bool:
    """True when any risk points at missing practice or preparation."""
    return any(
        "practice" in r.title.lower()
        or "preparation" in r.title.lower()
        or "practice" in r.rationale.lower()
        for r in risks
    )


def _classify(scores: CategoryScores, practice_flag: bool) -> tuple[ArchetypeTag, float]:
    hard = scores.hard_match
    evidence = scores.evidence_depth
    readiness = scores.round_readiness
    clarity = scores.clarity
    values = list(scores.as_dict().values())
    spread = max(values) - min(values)

    rules = [
        # Skills are there but presentation hides them
        (
            lambda: hard >= 0.7 and clarity < 0.5,
            lambda: ("technical_potential_low_polish", min(1.0, (hard - clarity) * 1.5)),
        ),
        # Can't demonstrate what they know
        (
            lambda: evidence < 0.5 and readiness < 0.5,
            lambda: (
                "strong_theoretical_weak_execution",
                min(1.0, (1 - evidence) * 0.5 + (1 - readiness) * 0.5),
            ),
        ),
        # Good resume, not interview-ready
        (
            lambda: clarity >= 0.7 and readiness < 0.5,
            lambda: ("resume_strong_system_weak", min(1.0, (clarity - readiness) * 1.2)),
        ),
        (
            lambda: hard >= 0.75 and practice_flag,
            lambda: ("high_ceiling_low_volume_practice", hard * 0.8),
        ),
        (
            lambda: all(0.4 <= v <= 0.7 for v in values),
            lambda: ("balanced_but_unproven", max(0.4, 0.8 - spread)),
        ),
    ]
    result = first_match(rules)
    if result is not None:
        return result

    # Fallback: the weakest area decides
    weakest = min(values)
    if weakest == clarity:
        tag = "technical_potential_low_polish"
    elif weakest in (evidence, readiness):
        tag = "strong_theoretical_weak_execution"
    else:
        tag = "balanced_but_unproven"
    return tag, 0.5


def classify_archetype(
    analysis: LLMAnalysis,
    personalized_tips: list[str] | None = None,
    resume: ExtractedResume | None = None,
    jd: ExtractedJD | None = None,
) -> ArchetypeProfile:
    """Classify the candidate into exactly one interview archetype.

    Args:
        analysis: validated analysis output.
        personalized_tips: candidate-specific tips; used instead of the canned
            tips when at least three are given.
        resume, jd: extracted facts; when both are present the description is
            extended with evidence from them.
    """
    scores = analysis.category_scores
    archetype, confidence = _classify(scores, has_practice_risk(analysis.ranked_risks))
    definition = ARCHETYPE_DEFINITIONS[archetype]

    tips = (
        list(personalized_tips)
        if personalized_tips and len(personalized_tips) >= MIN_PERSONALIZED_TIPS
        else list(definition["coaching_tips"])
    )

    description = definition["description"]
    if resume is not None and jd is not None:
        parts = _evidence_parts(archetype, scores, resume, jd)
        if parts:
            description = f"{description} {', '.join(parts)}."

    return ArchetypeProfile(
        archetype=archetype,
        confidence=round_to(clamp(confidence, 0.0, 1.0), 2),
        label=definition["label"],
        description=description,
        coaching_tips=tips,
        version=ARCHETYPE_VERSION,
    )


def _evidence_parts(
    archetype: str,
    scores: CategoryScores,
    resume: ExtractedResume,
    jd: ExtractedJD,
) -> list[str]:
    parts: list[str] = []
    top_skills = ", ".join(resume.skills[:3])
    clarity_pct = round_half_up(scores.clarity * 100)
    evidence_pct = round_half_up(scores.evidence_depth * 100)

    if top_skills:
        parts.append(f"Your skills in {top_skills} are noted")

    if archetype == "technical_potential_low_polish":
        if clarity_pct < 50:
            parts.append(f"but your resume clarity score ({clarity_pct}%) suggests presentation gaps")
    elif archetype == "strong_theoretical_weak_execution":
        if evidence_pct < 50:
            parts.append(f"but evidence depth ({evidence_pct}%) suggests limited concrete demonstrations")
    elif archetype == "resume_strong_system_weak":
        readiness_pct = round_half_up(scores.round_readiness * 100)
        parts.append(f"with strong clarity ({clarity_pct}%) but round readiness at {readiness_pct}%")
    elif archetype == "balanced_but_unproven":
        parts.append(f"across {pluralize(len(resume.experiences), 'role')} with no standout dimension")
    elif archetype == "high_ceiling_low_volume_practice":
        target = (
            f"JD requirements well ({round_half_up(scores.hard_match * 100)}%)"
            if jd.must_have
            else "the role"
        )
        parts.append(f"matching {target} but practice gaps remain")

    return parts
