"""Static text for the study plan: phase themes and synthetic filler tasks.

Synthetic templates take a ``{ref}`` placeholder that is filled with a
topic sampled from earlier days of the plan.
"""

from types import MappingProxyType
from typing import Mapping, NamedTuple


class TaskTemplate(NamedTuple):
    task: str
    description: str
    category: str
    minutes: int


# round type -> (early, mid, late) theme
PHASE_THEMES: Mapping[str, tuple[str, str, str]] = MappingProxyType({
    "technical": (
        "Foundation Review & Gap Analysis",
        "Deep Practice & Problem Solving",
        "Mock Interviews & Final Polish",
    ),
    "behavioral": (
        "Story Mining & STAR Framework",
        "Story Refinement & Delivery",
        "Mock Interviews & Confidence Building",
    ),
    "case": (
        "Framework Review & Mental Models",
        "Case Practice & Structuring",
        "Timed Cases & Presentation Polish",
    ),
    "finance": (
        "Core Concepts & Valuation Basics",
        "Modeling & Technical Deep-Dive",
        "Mock Technicals & Mental Math",
    ),
    "research": (
        "Paper Reading & ML Fundamentals Review",
        "Research Proposals & Experiment Design",
        "Mock Presentations & ML System Design",
    ),
})

SINGLE_DAY_THEME = "Intensive Review & Practice"

# Default {ref} when no earlier tasks exist, per phase
MID_DEFAULT_REF = "earlier topics"
LATE_DEFAULT_REF = "weak areas"
FINAL_DEFAULT_REF = "key topics"

MID_TEMPLATES: Mapping[str, tuple[TaskTemplate, ...]] = MappingProxyType({
    "technical": (
        TaskTemplate("Review & reattempt: {ref}", "Revisit an earlier problem to reinforce learning and identify lingering gaps.", "review", 25),
        TaskTemplate("Timed coding drill (2 medium problems, 25 min each)", "Build speed and accuracy under time pressure with fresh problems.", "practice", 50),
        TaskTemplate("Articulation practice: explain your approach aloud", "Practice narrating your thought process as you solve a problem — interviewers evaluate communication alongside code.", "practice", 20),
    ),
    "behavioral": (
        TaskTemplate("Refine STAR story inspired by: {ref}", "Revisit an earlier story draft, sharpen the Situation/Task/Action/Result structure.", "behavioral", 25),
        TaskTemplate("Record yourself telling a story and self-critique", "Hearing yourself reveals filler words, weak transitions, and missing impact statements.", "practice", 30),
        TaskTemplate("Draft a conflict-resolution story", "Interviewers frequently probe how you handle disagreements — prepare a polished example.", "behavioral", 25),
    ),
    "case": (
        TaskTemplate("Re-examine framework from: {ref}", "Revisit the framework you used earlier and stress-test it with a different scenario.", "review", 25),
        TaskTemplate("Timed mini-case: market sizing (15 min)", "Practice a quick market-sizing case to build estimation fluency.", "practice", 20),
        TaskTemplate("Structure a profitability case end-to-end", "Walk through a classic profitability case, focusing on clear structure and hypothesis-driven analysis.", "practice", 30),
    ),
    "finance": (
        TaskTemplate("Review valuation concept from: {ref}", "Revisit a valuation method studied earlier and work through a fresh example.", "review", 25),
        TaskTemplate("Mental math drill: quick multiples & percentages", "Speed drills on the mental math that comes up in finance interviews.", "practice", 20),
        TaskTemplate("Walk through a 3-statement model from memory", "Practice building income statement → balance sheet → cash flow linkages without notes.", "technical", 35),
    ),
    "research": (
        TaskTemplate("Re-read and summarize key paper: {ref}", "Revisit a foundational paper, write a one-paragraph summary of contributions and limitations.", "review", 30),
        TaskTemplate("ML concept drill: loss functions, optimization, regularization", "Practice explaining core ML concepts clearly — interviewers test depth of understanding.", "practice", 25),
        TaskTemplate("Design a simple experiment for a research question", "Practice formulating hypotheses, choosing baselines, and defining evaluation metrics.", "technical", 30),
    ),
})

LATE_TEMPLATES: Mapping[str, tuple[TaskTemplate, ...]] = MappingProxyType({
    "technical": (
        TaskTemplate("Mock technical interview simulation (45 min)", "Simulate a full interview round with a timer — solve, explain, and handle follow-ups.", "practice", 45),
        TaskTemplate("Targeted drill on weakness: {ref}", "Focus on the topic you struggled with most and solve 2-3 problems in that area.", "technical", 30),
        TaskTemplate("Consolidation: write a cheat sheet of key patterns", "Summarize the most important patterns, formulas, or templates you have learned so far.", "review", 20),
    ),
    "behavioral": (
        TaskTemplate("Mock behavioral interview: 4 questions in 20 min", "Practice answering rapid-fire behavioral questions to build fluency and confidence.", "practice", 25),
        TaskTemplate("Strengthen weakest story: {ref}", "Identify your least polished story and rewrite it with stronger action verbs and quantified impact.", "behavioral", 25),
        TaskTemplate('Prepare "tell me about yourself" (90-second version)', "Craft and rehearse a concise personal pitch that bridges your background to the target role.", "practice", 20),
    ),
    "case": (
        TaskTemplate("Full timed case interview simulation (30 min)", "Run through a complete case from prompt to recommendation under a strict timer.", "practice", 35),
        TaskTemplate("Drill weakness area: {ref}", "Revisit the case type or analytical step you found hardest and practice it in isolation.", "practice", 25),
        TaskTemplate("Practice delivering a crisp recommendation", "Focus on the final 2 minutes of a case — synthesize findings and present a clear, confident recommendation.", "practice", 20),
    ),
    "finance": (
        TaskTemplate("Mock technical Q&A: accounting & valuation", "Have someone (or a timer) quiz you on common finance interview questions.", "practice", 30),
        TaskTemplate("Deep review of weak concept: {ref}", "Spend focused time on the topic you are least confident about.", "review", 30),
        TaskTemplate('Practice "walk me through a DCF" end to end', "Rehearse the classic DCF walkthrough until it feels natural and complete.", "practice", 25),
    ),
    "research": (
        TaskTemplate("Mock research presentation (15 min talk + Q&A)", "Simulate presenting a paper or project to a panel — practice handling tough follow-up questions.", "practice", 30),
        TaskTemplate("Deep review of weak ML topic: {ref}", "Spend focused time on the ML concept or method you are least confident about.", "review", 30),
        TaskTemplate("Practice critiquing a paper: strengths, weaknesses, extensions", "Read a recent paper and practice articulating a balanced critique — a common research interview task.", "practice", 25),
    ),
})

FINAL_TEMPLATES: Mapping[str, tuple[TaskTemplate, ...]] = MappingProxyType({
    "technical": (
        TaskTemplate("Full mock interview under real conditions", "Simulate the entire interview experience — whiteboard/screen-share, time limit, verbal explanation.", "practice", 50),
        TaskTemplate("Final review: revisit {ref} and top patterns", "Do a light pass over the most important topics — reinforce, do not cram.", "review", 25),
        TaskTemplate("Prepare 3-4 thoughtful questions for your interviewer", "Having great questions shows genuine interest and preparation.", "review", 15),
        TaskTemplate("Logistics check: setup, links, ID, environment", "Verify your interview environment, tech setup, calendar invite, and any required documents.", "review", 10),
    ),
    "behavioral": (
        TaskTemplate("Full mock behavioral interview (30 min)", "Run through a complete behavioral round — opening pitch, 4-5 stories, closing questions.", "practice", 35),
        TaskTemplate("Final story polish: {ref}", "Give your best stories one last read-through — tighten language and ensure impact is clear.", "review", 20),
        TaskTemplate("Prepare insightful questions for the interviewer", "Show you have researched the company and role with 3-4 tailored questions.", "review", 15),
        TaskTemplate("Logistics & confidence prep", "Lay out your outfit, check your setup, and do a brief visualization/confidence exercise.", "review", 10),
    ),
    "case": (
        TaskTemplate("Full timed case simulation with presentation", "Run a complete case end-to-end including a final recommendation slide/summary.", "practice", 40),
        TaskTemplate("Quick framework refresher: {ref}", "Review your go-to frameworks one final time — make sure they are second nature.", "review", 15),
        TaskTemplate("Prepare questions to ask the interviewer", "Demonstrate curiosity and preparation with thoughtful, role-specific questions.", "review", 15),
        TaskTemplate("Pre-interview logistics and mental prep", "Confirm time, location/link, and do a brief warm-up case to get in the zone.", "review", 10),
    ),
    "finance": (
        TaskTemplate("Full mock technical + fit interview", "Simulate the complete interview flow — technical questions followed by fit/motivation questions.", "practice", 45),
        TaskTemplate("Final concept review: {ref}", "Light refresher on the core concepts — do not cram, just reinforce.", "review", 20),
        TaskTemplate("Prepare 3-4 smart questions about the team/deals", "Show you understand the group's focus and recent activity.", "review", 15),
        TaskTemplate("Logistics: print materials, check setup, rest well", "Handle all logistics so interview day is stress-free.", "review", 10),
    ),
    "research": (
        TaskTemplate("Full mock research interview: paper discussion + ML deep-dive", "Simulate a complete research interview — present your work, discuss papers, and answer ML theory questions.", "practice", 50),
        TaskTemplate("Final review: revisit {ref} and key ML concepts", "Do a light pass over the most important topics — reinforce, do not cram.", "review", 25),
        TaskTemplate("Prepare 3-4 thoughtful questions about the research group", "Show genuine interest in the team's research direction and recent publications.", "review", 15),
        TaskTemplate("Logistics check: setup, slides, environment", "Verify your interview environment, presentation materials, and any required documents.", "review", 10),
    ),
})
