"""Tests for LatencySampler."""

import pytest

from collapsesimulator.core.state import SimulationState
from collapsesimulator.distributions.latency import LatencySampler


class TestLatencySamplerCreation:
    """Tests for LatencySampler creation."""

    def test_rejects_non_positive_mean(self, scripted_random):
        """mean_latency must be > 0."""
        with pytest.raises(ValueError):
            LatencySampler(mean_latency=0.0, random=scripted_random())

        with pytest.raises(ValueError):
            LatencySampler(mean_latency=-5.0, random=scripted_random())


class TestLatencySampling:
    """Tests for sampled latencies."""

    def test_uses_quarter_mean_stddev(self, scripted_random):
        """Draws use mean_latency / 4 as standard deviation."""
        random = scripted_random(normals=[40.0])
        sampler = LatencySampler(mean_latency=40.0, random=random)

        sample = sampler.sample(SimulationState())

        assert random.normal_calls == [(40.0, 10.0)]
        assert sample.ticks == 40
        assert sample.spiked is False

    def test_negative_draw_is_zero_ticks(self, scripted_random):
        """Negative draws are clamped to zero work."""
        sampler = LatencySampler(mean_latency=1.0, random=scripted_random(normals=[-0.7]))

        assert sampler.sample(SimulationState()).ticks == 0

    def test_fraction_is_truncated(self, scripted_random):
        """Fractional latencies round toward zero."""
        sampler = LatencySampler(mean_latency=3.0, random=scripted_random(normals=[3.99]))

        assert sampler.sample(SimulationState()).ticks == 3


class TestSpikeWindow:
    """Tests for the request-counted spike window."""

    def test_multiplies_while_window_open(self, scripted_random):
        """Requests inside the window are 10x slower and the window shrinks."""
        sampler = LatencySampler(mean_latency=5.0, random=scripted_random(normals=[5.0, 5.0, 5.0]))
        state = SimulationState(spike_requests_remaining=2)

        samples = [sampler.sample(state) for _ in range(3)]

        assert [s.ticks for s in samples] == [50, 50, 5]
        assert [s.spiked for s in samples] == [True, True, False]
        assert state.spike_requests_remaining == 0

    def test_multiplier_applies_before_truncation(self, scripted_random):
        """The multiplier is applied to the raw draw, then truncated."""
        sampler = LatencySampler(mean_latency=2.0, random=scripted_random(normals=[2.95]))
        state = SimulationState(spike_requests_remaining=1)

        assert sampler.sample(state).ticks == 29

    def test_window_ignores_tick_boundaries(self, scripted_random):
        """The window is consumed per request, even within one tick."""
        sampler = LatencySampler(mean_latency=1.0, random=scripted_random())
        state = SimulationState(tick=0, spike_requests_remaining=3)

        for _ in range(3):
            sampler.sample(state)

        assert state.tick == 0
        assert state.spike_requests_remaining == 0
