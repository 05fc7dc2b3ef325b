"""All prompt templates for Gemini API calls."""

import json

from models.schemas.jd_extracted import ExtractedJD
from models.schemas.resume_extracted import ExtractedResume
from models.schemas.retrieval import RetrievalResult


def build_resume_extraction_prompt(resume_text: str) -> str:
    """Call A: structured facts from the resume. Extract, never judge."""
    return f"""You are a precise resume parser. Extract facts only; do not evaluate or embellish.

RULES:
- Copy skills, company names and roles exactly as written
- "metrics" are quantified outcomes (percentages, counts, money, latency, users)
- "recency_signals" are hints about how current the experience is (dates, "currently", recent tools)
- "project_evidence" are one-line descriptions of concrete projects or shipped work
- If a field has no evidence, return an empty list

RESUME:
---
{resume_text}
---

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "skills": [<technical and domain skills>],
  "experiences": [
    {{
      "company": "<employer name>",
      "role": "<job title>",
      "dates": "<date range as written, e.g. Jan 2020 - Present>",
      "achievements": [<bullet-level accomplishments>]
    }}
  ],
  "metrics": [<quantified outcomes>],
  "recency_signals": [<signals of recent activity>],
  "project_evidence": [<concrete project descriptions>]
}}"""


def build_jd_extraction_prompt(jd_text: str) -> str:
    """Call B: structured requirements from the job description."""
    return f"""You are a precise job description parser. Separate hard requirements from preferences.

RULES:
- "must_have": requirements stated as required, minimum, or "must"
- "nice_to_have": preferred, bonus, or "plus" qualifications
- "keywords": other technical terms and tools mentioned
- "seniority_signals": phrases indicating level (years of experience, "senior", "intern", "lead")
- "company_context_keywords": culture, values, product or mission terms that are NOT requirements
- Use null for company_name or job_title when not stated

JOB DESCRIPTION:
---
{jd_text}
---

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "must_have": [<required qualifications>],
  "nice_to_have": [<preferred qualifications>],
  "keywords": [<technical terms>],
  "seniority_signals": [<level indicators>],
  "company_name": "<hiring company or null>",
  "job_title": "<role title or null>",
  "company_context_keywords": [<soft company signals>]
}}"""


def build_analysis_prompt(
    resume: ExtractedResume,
    jd: ExtractedJD,
    round_type: str,
    context: RetrievalResult,
) -> str:
    """Call C: readiness analysis grounded in retrieved rubric and question context.

    The model acts as analyst, not scoring authority: it returns normalized
    category scores and the final score is computed deterministically.
    """
    rubric_text = "\n\n".join(f"[{c.id}] {c.chunk_text}" for c in context.rubric_chunks)
    questions_text = "\n".join(f"[{q.id}] {q.question_template}" for q in context.question_archetypes)

    return f"""You are an expert interview analyst. Analyze the candidate's readiness for a {round_type} interview.

RESUME DATA:
{json.dumps(resume.model_dump(), indent=2)}

JOB DESCRIPTION REQUIREMENTS:
{json.dumps(jd.model_dump(), indent=2)}

EVALUATION RUBRIC:
{rubric_text or "(none retrieved)"}

QUESTION BANK CONTEXT:
{questions_text or "(none retrieved)"}

RULES:
- Every risk must cite the JD requirement it concerns (jd_refs) and the rubric chunk ids used (rubric_refs)
- Do not raise risks from company culture keywords alone
- Study tasks and coaching must be specific to this candidate: do NOT write generic advice such as
  "learn X" or "brush up on Y" that only restates a JD requirement
- Only raise risks relevant to a {round_type} round

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "category_scores": {{
    "hard_match": <0-1 score for hard requirement match>,
    "evidence_depth": <0-1 score for evidence depth>,
    "round_readiness": <0-1 score for round readiness>,
    "clarity": <0-1 score for resume clarity>,
    "company_proxy": <0-1 score for company expectation match>
  }},
  "ranked_risks": [
    {{
      "id": "<unique id, e.g. r1>",
      "title": "<short title>",
      "severity": "<critical|high|medium|low>",
      "rationale": "<why this is a risk>",
      "missing_evidence": "<what is missing from the resume>",
      "rubric_refs": [<rubric chunk ids>],
      "jd_refs": [<JD requirement refs>]
    }}
  ],
  "interview_questions": [
    {{
      "question": "<likely interview question>",
      "mapped_risk_id": "<risk id this tests>",
      "why": "<why they might ask this>"
    }}
  ],
  "study_plan": [
    {{
      "task": "<specific prep task>",
      "time_estimate_minutes": <integer > 0>,
      "mapped_risk_id": "<risk id this addresses>",
      "description": "<what to do and how to know it is done>",
      "priority": "<critical|high|medium|low>",
      "category": "<technical|behavioral|practice|review>"
    }}
  ],
  "personalized_coaching": {{
    "archetype_tips": [<3-5 tips specific to this candidate's profile>],
    "round_focus": "<one or two sentences on what to focus on for this round>",
    "priority_actions": [
      {{
        "action": "<concrete action>",
        "rationale": "<why it matters for this candidate>",
        "resources": [<resource names or links>]
      }}
    ]
  }},
  "recruiter_signals": {{
    "immediate_red_flags": [<what a recruiter would flag in a first 30-second scan>],
    "hidden_strengths": [<strengths a quick scan would miss>],
    "estimated_screen_time_seconds": <integer seconds a recruiter spends on this resume>,
    "first_impression": "<proceed|maybe|reject>"
  }}
}}"""
