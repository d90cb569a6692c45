"""Tests for SimulationSummary."""

from collapsesimulator.instrumentation.summary import SimulationSummary


def _summary(**overrides) -> SimulationSummary:
    params = dict(
        ticks=1000,
        total_requests=200,
        failed_requests=50,
        rejected_requests=30,
        timed_out_requests=20,
        completed_requests=150,
        retried_requests=25,
        peak_queue_depth=12,
        final_queue_depth=3,
        busy_workers=4,
        discipline="FIFO",
        wall_clock_seconds=0.25,
    )
    params.update(overrides)
    return SimulationSummary(**params)


class TestFailureRate:
    """Tests for failure rate reporting."""

    def test_percentage(self):
        assert _summary().failure_rate == 25.0

    def test_line_has_two_decimals(self):
        summary = _summary(total_requests=3, failed_requests=1)
        assert summary.failure_rate_line() == "Failure rate: 33.33%"

    def test_no_requests_is_not_a_number(self):
        summary = _summary(total_requests=0, failed_requests=0)

        assert summary.failure_rate is None
        assert summary.failure_rate_line() == "Failure rate: N/A (no requests)"

    def test_zero_failures(self):
        assert _summary(failed_requests=0).failure_rate_line() == "Failure rate: 0.00%"


class TestSummaryFormatting:
    """Tests for __str__ and to_dict."""

    def test_str_format(self):
        text = str(_summary())

        assert text.startswith("Simulation Summary")
        assert "Ticks: 1000" in text
        assert "rejected=30" in text
        assert "timed out=20" in text
        assert "peak=12" in text

    def test_to_dict(self):
        d = _summary().to_dict()

        assert d["total_requests"] == 200
        assert d["failure_rate"] == 25.0
        assert d["discipline"] == "FIFO"
        assert d["wall_clock_seconds"] == 0.25
