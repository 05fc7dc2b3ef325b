"""Study plan generator: pack analysis study tasks into a day-by-day plan.

Flow:
    analysis tasks -> DetailedTask (priority from mapped risk, category from keywords)
      -> sort: priority, focus-area match, shorter first
      -> greedy packing under the daily minutes budget
      -> overflow onto the least-loaded day
      -> sparse days (<40% of budget) topped up with synthetic phase tasks
      -> labels and themes
"""

import logging
import re

from models.schemas.llm_analysis import RiskItem, StudyTask
from models.schemas.study_plan import DailyPlan, DetailedTask, PersonalizedStudyPlan, PrepPreferences
from services.scoring.rules import round_half_up, round_to
from services.scoring.study_templates import (
    FINAL_DEFAULT_REF,
    FINAL_TEMPLATES,
    LATE_DEFAULT_REF,
    LATE_TEMPLATES,
    MID_DEFAULT_REF,
    MID_TEMPLATES,
    PHASE_THEMES,
    SINGLE_DAY_THEME,
    TaskTemplate,
)
from services.scoring.trajectory import TIMELINE_DAYS

logger = logging.getLogger(__name__)

STUDY_PLAN_VERSION = "v0.1"

PRIORITY_ORDER = {"critical": 0, "high": 1, "medium": 2, "low": 3}

FOCUS_AREA_CATEGORIES = {
    "technical_depth": ("technical",),
    "behavioral_stories": ("behavioral",),
    "system_design": ("technical",),
    "communication": ("behavioral", "practice"),
    "domain_knowledge": ("technical", "review"),
}

SPARSE_DAY_RATIO = 0.4
TOPIC_SAMPLE_COUNT = 3
TOPIC_MAX_CHARS = 60

# Checked in order; first category whose pattern matches the task text wins
_CATEGORY_PATTERNS = (
    ("practice", re.compile(r"practice|mock|drill")),
    ("technical", re.compile(r"code|algorithm|system|technical")),
    ("behavioral", re.compile(r"story|\bstar\b|behavioral|example")),
)


def infer_category(task_text: str) -> str:
    text = task_text.lower()
    for category, pattern in _CATEGORY_PATTERNS:
        if pattern.search(text):
            return category
    return "review"


def to_detailed_tasks(tasks: list[StudyTask], risks: list[RiskItem]) -> list[DetailedTask]:
    """Fill in priority, category and description for each analysis task."""
    risk_map = {r.id: r for r in risks}
    detailed = []
    for index, task in enumerate(tasks, start=1):
        risk = risk_map.get(task.mapped_risk_id)
        severity = risk.severity if risk else "medium"
        inferred_priority = severity if severity in ("critical", "high") else "medium"
        detailed.append(
            DetailedTask(
                id=f"task-{index}",
                task=task.task,
                description=task.description or f"Address the gap: {risk.title if risk else 'identified risk'}",
                time_estimate_minutes=task.time_estimate_minutes,
                priority=task.priority or inferred_priority,
                mapped_risk_id=task.mapped_risk_id,
                category=task.category or infer_category(task.task),
            )
        )
    return detailed


def sort_tasks(tasks: list[DetailedTask], focus_areas: list[str]) -> list[DetailedTask]:
    preferred = {c for area in focus_areas for c in FOCUS_AREA_CATEGORIES[area]}
    return sorted(
        tasks,
        key=lambda t: (
            PRIORITY_ORDER[t.priority],
            0 if t.category in preferred else 1,
            t.time_estimate_minutes,
        ),
    )


def distribute_tasks(sorted_tasks: list[DetailedTask], total_days: int, daily_minutes: int) -> list[DailyPlan]:
    """Greedy packing of tasks into days under a minutes budget.

    A day takes the next task if it fits (or the day is still empty),
    otherwise the first later task that fits. Tasks left over once every
    day is packed go to whichever day has the least time allocated.
    """
    pending = list(sorted_tasks)
    plans: list[DailyPlan] = []

    for day in range(1, total_days + 1):
        day_tasks: list[DetailedTask] = []
        remaining = daily_minutes

        while pending and remaining > 0:
            head = pending[0]
            if head.time_estimate_minutes <= remaining or not day_tasks:
                picked = pending.pop(0)
            else:
                fits = next(
                    (i for i in range(1, len(pending)) if pending[i].time_estimate_minutes <= remaining),
                    None,
                )
                if fits is None:
                    break
                picked = pending.pop(fits)
            day_tasks.append(picked)
            remaining -= picked.time_estimate_minutes

        # Zero budget still gets one task per day
        if not day_tasks and pending:
            day_tasks.append(pending.pop(0))

        plans.append(
            DailyPlan(
                day_number=day,
                label="",
                theme="",
                total_minutes=sum(t.time_estimate_minutes for t in day_tasks),
                tasks=day_tasks,
            )
        )

    for task in pending:
        lightest = min(plans, key=lambda p: p.total_minutes)
        lightest.tasks.append(task)
        lightest.total_minutes += task.time_estimate_minutes

    return plans


# ---------------------------------------------------------------------------
# Synthetic filler for sparse days
# ---------------------------------------------------------------------------

def _truncate(text: str, max_len: int) -> str:
    return text if len(text) <= max_len else text[: max_len - 1] + "…"


def _sample_topics(prior_tasks: list[DetailedTask], count: int) -> list[str]:
    """Evenly spaced task names from earlier days."""
    names = [_truncate(t.task, TOPIC_MAX_CHARS) for t in prior_tasks]
    if len(names) <= count:
        return names
    step = len(names) // count
    return [names[i * step] for i in range(count)]


def _phase_templates(progress: float, round_type: str) -> tuple[tuple[TaskTemplate, ...], str]:
    if progress <= 0.6:
        return MID_TEMPLATES[round_type], MID_DEFAULT_REF
    if progress <= 0.85:
        return LATE_TEMPLATES[round_type], LATE_DEFAULT_REF
    return FINAL_TEMPLATES[round_type], FINAL_DEFAULT_REF


def _synthetic_tasks(
    day_number: int,
    total_days: int,
    minutes_to_fill: int,
    prior_tasks: list[DetailedTask],
    round_type: str,
    first_id: int,
) -> list[DetailedTask]:
    templates, default_ref = _phase_templates(day_number / total_days, round_type)
    topics = _sample_topics(prior_tasks, TOPIC_SAMPLE_COUNT)
    ref = topics[0] if topics else default_ref

    result = []
    remaining = minutes_to_fill
    for offset, tpl in enumerate(templates):
        if remaining <= 0:
            break
        minutes = min(tpl.minutes, remaining)
        result.append(
            DetailedTask(
                id=f"task-synth-{first_id + offset}",
                task=tpl.task.format(ref=ref),
                description=tpl.description,
                time_estimate_minutes=minutes,
                priority="medium",
                mapped_risk_id="synthetic",
                category=tpl.category,
            )
        )
        remaining -= minutes
    return result


def fill_sparse_days(plans: list[DailyPlan], daily_minutes: int, round_type: str) -> None:
    """Top up days using under 40% of the budget. Mutates ``plans`` in place."""
    threshold = daily_minutes * SPARSE_DAY_RATIO
    prior_tasks: list[DetailedTask] = []
    next_id = 1

    for plan in plans:
        if plan.total_minutes < threshold:
            filler = _synthetic_tasks(
                plan.day_number,
                len(plans),
                daily_minutes - plan.total_minutes,
                prior_tasks,
                round_type,
                next_id,
            )
            plan.tasks.extend(filler)
            plan.total_minutes += sum(t.time_estimate_minutes for t in filler)
            next_id += len(filler)
        prior_tasks.extend(plan.tasks)


# ---------------------------------------------------------------------------
# Labels and themes
# ---------------------------------------------------------------------------

def day_label(day_number: int, total_days: int) -> str:
    if total_days == 1:
        return "Today"
    if day_number == 1:
        return "Day 1 (Today)"
    if day_number == total_days:
        return f"Day {day_number} (Interview Day)"
    return f"Day {day_number}"


def day_theme(day_number: int, total_days: int, round_type: str) -> str:
    if total_days == 1:
        return SINGLE_DAY_THEME
    early, mid, late = PHASE_THEMES[round_type]
    progress = day_number / total_days
    if progress <= 0.3:
        return early
    if progress <= 0.7:
        return mid
    return late


def generate_personalized_study_plan(
    tasks: list[StudyTask],
    preferences: PrepPreferences,
    risks: list[RiskItem],
    round_type: str,
) -> PersonalizedStudyPlan:
    total_days = TIMELINE_DAYS[preferences.timeline]
    daily_minutes = round_half_up(preferences.daily_hours * 60)

    ordered = sort_tasks(to_detailed_tasks(tasks, risks), preferences.focus_areas)
    plans = distribute_tasks(ordered, total_days, daily_minutes)
    fill_sparse_days(plans, daily_minutes, round_type)

    for plan in plans:
        plan.label = day_label(plan.day_number, total_days)
        plan.theme = day_theme(plan.day_number, total_days, round_type)

    total_minutes = sum(p.total_minutes for p in plans)
    logger.info(
        "Study plan: %d tasks over %d days (%d min/day budget)",
        sum(len(p.tasks) for p in plans), total_days, daily_minutes,
    )

    return PersonalizedStudyPlan(
        preferences=preferences,
        total_days=total_days,
        total_hours=round_to(total_minutes / 60, 1),
        daily_plans=plans,
        version=STUDY_PLAN_VERSION,
    )
