from collections import namedtuple

import numpy as onp


__all__ = (
    'Trace',
    'TraceSet',
)


Trace = namedtuple('Trace', ('state', 'action', 'weight'))


class TraceSet:
    r"""

    An ordered collection of eligibility traces :math:`(s_i, a_i, w_i)`.

    Every trace carries the (decaying) credit of an earlier visit to the state-action pair
    :math:`(s_i, a_i)`. Visits are not merged, i.e. revisiting a pair adds a new trace next to the
    existing one(s).

    The traces are stored in three parallel arrays that grow geometrically. Pruning compacts the
    arrays in place, preserving the insertion order of the surviving traces.

    Parameters
    ----------
    traces : iterable of (int, int, float) triples, optional

        Initial traces, e.g. the output of :func:`list(other_trace_set) <list>`.

    """
    _INITIAL_CAPACITY = 16

    def __init__(self, traces=()):
        self.clear()
        for s, a, w in traces:
            self.append(s, a, w)

    def clear(self):
        r""" Remove all traces. """
        self._n = 0
        self._S = onp.zeros(self._INITIAL_CAPACITY, dtype='int64')
        self._A = onp.zeros(self._INITIAL_CAPACITY, dtype='int64')
        self._W = onp.zeros(self._INITIAL_CAPACITY, dtype='float64')

    def append(self, s, a, weight=1.0):
        r"""

        Add a new trace at the end of the collection.

        Parameters
        ----------
        s : int

            The state index.

        a : int

            The action index.

        weight : float, optional

            The initial credit of the trace.

        """
        if self._n == len(self._W):
            self._grow()
        self._S[self._n] = s
        self._A[self._n] = a
        self._W[self._n] = weight
        self._n += 1

    def decay(self, factor):
        r"""

        Multiply the weight of every trace by a common factor.

        Parameters
        ----------
        factor : float

            The decay factor, typically (but not necessarily) in :math:`[0, 1]`.

        """
        self._W[:self._n] *= factor

    def prune(self, epsilon):
        r"""

        Remove all traces whose weight has dropped below a cutoff, i.e. traces with
        :math:`|w_i| < \epsilon`.

        Parameters
        ----------
        epsilon : float

            The trace cutoff.

        Returns
        -------
        num_removed : int

            The number of traces that were removed.

        """
        keep = onp.abs(self._W[:self._n]) >= epsilon
        n = int(onp.sum(keep))
        if n < self._n:
            self._S[:n] = self._S[:self._n][keep]
            self._A[:n] = self._A[:self._n][keep]
            self._W[:n] = self._W[:self._n][keep]
        num_removed, self._n = self._n - n, n
        return num_removed

    def apply(self, q, error):
        r"""

        Distribute a TD error over the value table in proportion to the trace weights:

        .. math::

            q(s_i, a_i)\ \leftarrow\ q(s_i, a_i) + \text{error}\times w_i

        Pairs that occur in multiple traces receive the sum of their contributions.

        Parameters
        ----------
        q : ndarray, shape: [num_states, num_actions]

            The value table, updated in place.

        error : float

            The (learning-rate scaled) TD error.

        """
        onp.add.at(q, (self.states, self.actions), error * self.weights)

    @property
    def states(self):
        r""" The state indices of all live traces (a read-only view). """
        return self._readonly(self._S)

    @property
    def actions(self):
        r""" The action indices of all live traces (a read-only view). """
        return self._readonly(self._A)

    @property
    def weights(self):
        r""" The weights of all live traces (a read-only view). """
        return self._readonly(self._W)

    def _readonly(self, arr):
        view = arr[:self._n]
        view.flags.writeable = False
        return view

    def _grow(self):
        capacity = 2 * len(self._W)
        self._S = onp.resize(self._S, capacity)
        self._A = onp.resize(self._A, capacity)
        self._W = onp.resize(self._W, capacity)

    def __len__(self):
        return self._n

    def __iter__(self):
        for s, a, w in zip(self._S[:self._n], self._A[:self._n], self._W[:self._n]):
            yield Trace(int(s), int(a), float(w))

    def __repr__(self):
        return f"{self.__class__.__name__}({list(self)})"
