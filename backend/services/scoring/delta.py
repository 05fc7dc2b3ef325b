"""Delta between two diagnostic runs of the same report (e.g. after a resume rewrite)."""

from models.responses import DeltaComparison, DiagnosticReport


def compute_delta(previous: DiagnosticReport, current: DiagnosticReport) -> DeltaComparison:
    """Compare risks by title: resolved, still present, or newly raised."""
    previous_titles = {r.title for r in previous.ranked_risks}
    current_titles = {r.title for r in current.ranked_risks}

    return DeltaComparison(
        previous_score=previous.readiness_score,
        current_score=current.readiness_score,
        score_delta=current.readiness_score - previous.readiness_score,
        resolved_risks=[r for r in previous.ranked_risks if r.title not in current_titles],
        remaining_risks=[r for r in current.ranked_risks if r.title in previous_titles],
        new_risks=[r for r in current.ranked_risks if r.title not in previous_titles],
    )
