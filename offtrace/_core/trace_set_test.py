import pytest
import numpy as onp

from .._base.test_case import TestCase
from .trace_set import Trace, TraceSet


def test_append_preserves_order():
    traces = TraceSet()
    traces.append(0, 1)
    traces.append(2, 0, 0.5)
    traces.append(0, 1, 0.25)  # revisits aren't merged
    assert list(traces) == [Trace(0, 1, 1.0), Trace(2, 0, 0.5), Trace(0, 1, 0.25)]
    assert len(traces) == 3


def test_init_from_triples():
    traces = TraceSet([(3, 1, 0.7), (0, 0, 1.0)])
    assert list(traces) == [(3, 1, 0.7), (0, 0, 1.0)]
    assert list(TraceSet(traces)) == list(traces)


def test_grow_beyond_initial_capacity():
    traces = TraceSet()
    for i in range(40):
        traces.append(i, i % 3, 1.0 / (i + 1))
    assert len(traces) == 40
    assert [t.state for t in traces] == list(range(40))
    assert traces.weights[-1] == pytest.approx(1 / 40)


def test_iter_yields_python_scalars():
    trace, = TraceSet([(1, 2, 0.5)])
    assert type(trace.state) is int
    assert type(trace.action) is int
    assert type(trace.weight) is float


def test_readonly_views():
    traces = TraceSet([(1, 2, 0.5)])
    with pytest.raises(ValueError):
        traces.weights[0] = 1.0
    with pytest.raises(ValueError):
        traces.states[0] = 0


def test_clear():
    traces = TraceSet([(1, 2, 0.5), (0, 0, 1.0)])
    traces.clear()
    assert len(traces) == 0
    assert list(traces) == []


class TestTraceSet(TestCase):
    def test_decay(self):
        traces = TraceSet([(0, 0, 1.0), (1, 0, 0.5), (2, 1, -0.2)])
        traces.decay(0.5)
        self.assertArrayAlmostEqual(traces.weights, [0.5, 0.25, -0.1])

    def test_prune(self):
        traces = TraceSet([(0, 0, 0.5), (1, 0, 0.05), (2, 1, -0.5), (3, 1, 0.1), (4, 0, -0.01)])
        num_removed = traces.prune(0.1)
        self.assertEqual(num_removed, 2)
        self.assertEqual(list(traces), [(0, 0, 0.5), (2, 1, -0.5), (3, 1, 0.1)])

    def test_prune_nothing(self):
        traces = TraceSet([(0, 0, 0.5), (1, 0, 0.25)])
        self.assertEqual(traces.prune(0.01), 0)
        self.assertEqual(len(traces), 2)

    def test_prune_all(self):
        traces = TraceSet([(0, 0, 0.001), (1, 0, 0.002)])
        self.assertEqual(traces.prune(0.01), 2)
        self.assertEqual(list(traces), [])

        # still usable after pruning everything
        traces.append(4, 1)
        self.assertEqual(list(traces), [(4, 1, 1.0)])

    def test_apply(self):
        q = onp.zeros((3, 2))
        traces = TraceSet([(0, 0, 1.0), (0, 0, 0.5), (1, 1, 0.25)])
        traces.apply(q, 2.0)
        self.assertArrayAlmostEqual(q, [[3.0, 0.0], [0.0, 0.5], [0.0, 0.0]])

    def test_apply_empty(self):
        q = onp.ones((3, 2))
        TraceSet().apply(q, 2.0)
        self.assertArrayAlmostEqual(q, onp.ones((3, 2)))

    def test_repr(self):
        traces = TraceSet([(0, 1, 0.5)])
        self.assertEqual(
            repr(traces), "TraceSet([Trace(state=0, action=1, weight=0.5)])")
