from datetime import date, timedelta
from utils.progress import rate_progress, rollup_progress, summarize_cadet_progress, weeks_between




def cadet(**fields):
    base = {
        "id": 1,
        "academic_progress": 0,
        "fitness_progress": 0,
        "leadership_progress": 0,
        "service_hours": 0,
        "start_date": None,
    }
    base.update(fields)
    return base


class TestRollupProgress:
    def test_empty_cohort(self):
        """Nobody to average means no axes at all"""
        assert rollup_progress([]) == []

    def test_axes_in_order(self):
        axes = rollup_progress([cadet(academic_progress=70), cadet(academic_progress=81)])

        assert [axis.key for axis in axes] == ["academic", "fitness", "leadership", "community_service"]
        assert [axis.label for axis in axes] == [
            "Academic Excellence", "Physical Fitness", "Leadership Development", "Community Service"
        ]
        assert axes[0].value == 76

    def test_service_axis_capped(self):
        axes = rollup_progress([cadet(service_hours=150), cadet(service_hours=90)])
        assert axes[-1].value == 100

    def test_missing_values_count_as_zero(self):
        axes = rollup_progress([cadet(fitness_progress=None), cadet(fitness_progress=60)])
        assert axes[1].value == 30


class TestCadetSummary:
    def test_summary(self):
        today = date(2026, 10, 17)
        summary = summarize_cadet_progress(
            cadet(
                id=7,
                academic_progress=90,
                fitness_progress=85,
                leadership_progress=70,
                service_hours=41,
                start_date=today - timedelta(weeks=11),
            ),
            today,
        )

        assert summary.cadet_id == 7
        assert summary.overall_progress == 81.7
        assert [c.rating for c in summary.components] == ["excellent", "excellent", "good"]
        assert summary.weeks_in_program == 11
        assert summary.program_progress == 50
        assert summary.service_hours_complete
        assert summary.core_components_complete

    def test_program_progress_capped(self):
        today = date(2026, 10, 17)
        summary = summarize_cadet_progress(cadet(start_date=today - timedelta(weeks=30)), today)
        assert summary.program_progress == 100

    def test_future_start(self):
        assert weeks_between(date(2026, 11, 1), date(2026, 10, 17)) == 0

    def test_ratings(self):
        assert rate_progress(80) == "excellent"
        assert rate_progress(60) == "good"
        assert rate_progress(40) == "fair"
        assert rate_progress(39.9) == "needs_improvement"
