from utils.metrics import build_metrics, compute_graduation_rate, round_half_up




class TestRoundHalfUp:
    def test_half_goes_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1

    def test_one_decimal(self):
        assert round_half_up(33.333, 1) == 33.3
        assert round_half_up(66.666, 1) == 66.7


class TestGraduationRate:
    def test_no_cadets_is_zero(self):
        assert compute_graduation_rate(0, 0) == 0.0

    def test_one_of_three(self):
        assert compute_graduation_rate(1, 3) == 33.3


class TestBuildMetrics:
    def test_counts_by_status(self):
        metrics = build_metrics({"active": 2, "graduated": 1}, 57, 4)
        assert metrics.active_participants == 2
        assert metrics.graduation_rate == 33.3
        assert metrics.service_hours == 57
        assert metrics.pending_applications == 4

    def test_empty_campus(self):
        metrics = build_metrics({}, None, 0)
        assert metrics.active_participants == 0
        assert metrics.graduation_rate == 0.0
        assert metrics.service_hours == 0

    def test_dismissed_and_withdrawn_count_towards_total(self):
        metrics = build_metrics({"graduated": 1, "dismissed": 1, "withdrawn": 2}, 0, 0)
        assert metrics.graduation_rate == 25.0
