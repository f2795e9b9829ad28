from abc import ABC, abstractmethod

import numpy as onp

from .._base.errors import InvalidArgumentError
from .._base.mixins import CopyMixin, LoggerMixin, SerializationMixin
from ..trace_discounts import BaseTraceDiscount, ImportanceSampling
from ..utils import is_policy
from .trace_set import TraceSet


__all__ = (
    'BaseOffPolicy',
)


class BaseOffPolicy(ABC, LoggerMixin, CopyMixin, SerializationMixin):
    r"""

    Abstract base class for tabular off-policy learners with eligibility traces.

    This class owns the value table :math:`q(s,a)` and the eligibility traces. The derived classes
    only decide how to construct the TD-target, while the trace discount is delegated to a
    :mod:`trace-discount strategy <offtrace.trace_discounts>`.

    Parameters
    ----------
    pi_behavior : BasePolicy

        The behavior policy, i.e. the policy that generates the experience. The number of states
        and actions are taken from this policy.

    discount : float, optional

        The discount factor :math:`\gamma`. This is meaningful in :math:`[0, 1]`, but it isn't
        checked.

    learning_rate : float, optional

        The learning rate :math:`\alpha\in(0, 1]`.

    epsilon : positive float, optional

        The trace cutoff :math:`\epsilon`. Traces whose weight drops below this value (in absolute
        terms) are discarded. Note that this is *not* an exploration parameter.

    trace_discount : BaseTraceDiscount, optional

        The strategy that computes the trace discount at each step. The default is
        :class:`ImportanceSampling <offtrace.trace_discounts.ImportanceSampling>`.

    q : array_like, shape: [num_states, num_actions], optional

        The initial value table. If left unspecified, the table is initialized with zeros.

    """
    def __init__(
            self, pi_behavior, discount=1.0, learning_rate=0.1, epsilon=0.001,
            trace_discount=None, q=None):

        if not is_policy(pi_behavior):
            raise TypeError(f"pi_behavior must be a policy, got: {type(pi_behavior)}")
        if trace_discount is None:
            trace_discount = ImportanceSampling()
        if not isinstance(trace_discount, BaseTraceDiscount):
            raise TypeError(
                f"trace_discount must be a BaseTraceDiscount, got: {type(trace_discount)}")

        self.pi_behavior = pi_behavior
        self.trace_discount = trace_discount
        self.learning_rate = learning_rate
        self.discount = discount
        self.epsilon = epsilon

        self._q = onp.zeros((self.num_states, self.num_actions))
        self._traces = TraceSet()
        if q is not None:
            self.q = q

    @property
    def num_states(self):
        r""" The number of states :math:`S`. """
        return self.pi_behavior.num_states

    @property
    def num_actions(self):
        r""" The number of actions :math:`A`. """
        return self.pi_behavior.num_actions

    @property
    def observation_space(self):
        r""" The space of state indices. """
        return self.pi_behavior.observation_space

    @property
    def action_space(self):
        r""" The space of action indices. """
        return self.pi_behavior.action_space

    @property
    def learning_rate(self):
        r"""

        The learning rate :math:`\alpha`.

        The learning rate sets how fast the value table moves towards new data. In deterministic
        environments it can safely be set to 1. In stochastic environments it should start high
        and be decreased over time in order to converge.

        Setting a value outside of :math:`(0, 1]` raises an :class:`InvalidArgumentError
        <offtrace.InvalidArgumentError>`, leaving the current value untouched.

        """
        return self._learning_rate

    @learning_rate.setter
    def learning_rate(self, new_learning_rate):
        new_learning_rate = float(new_learning_rate)
        if not 0 < new_learning_rate <= 1:
            raise InvalidArgumentError(f"learning_rate must be in (0, 1], got: {new_learning_rate}")
        self._learning_rate = new_learning_rate
        self.logger.debug(f"learning_rate set to {new_learning_rate:g}")

    @property
    def discount(self):
        r"""

        The discount factor :math:`\gamma`.

        With :math:`\gamma=1` all rewards count the same, regardless of when they're obtained. With
        :math:`\gamma<1` rewards obtained sooner are valued more than rewards obtained later.

        """
        return self._discount

    @discount.setter
    def discount(self, new_discount):
        self._discount = float(new_discount)
        self.logger.debug(f"discount set to {self._discount:g}")

    @property
    def epsilon(self):
        r"""

        The trace cutoff :math:`\epsilon`. A trace is removed as soon as :math:`|w_i|<\epsilon`.

        """
        return self._epsilon

    @epsilon.setter
    def epsilon(self, new_epsilon):
        self._epsilon = float(new_epsilon)
        self.logger.debug(f"epsilon set to {self._epsilon:g}")

    @property
    def q(self):
        r"""

        The value table :math:`q(s,a)`, an array of shape ``(num_states, num_actions)``.

        The getter returns a read-only view, e.g. to construct an :class:`EpsilonGreedy
        <offtrace.EpsilonGreedy>` policy. The setter copies the given array, which is useful to
        start from a value table that has been computed elsewhere.

        """
        view = self._q.view()
        view.flags.writeable = False
        return view

    @q.setter
    def q(self, new_q):
        new_q = onp.array(new_q, dtype='float64')
        if new_q.shape != (self.num_states, self.num_actions):
            raise InvalidArgumentError(
                f"q must have shape {(self.num_states, self.num_actions)}, got: {new_q.shape}")
        self._q = new_q

    @property
    def traces(self):
        r"""

        The live eligibility traces, a list of :class:`Trace <offtrace.Trace>` namedtuples
        ``(state, action, weight)`` in insertion order.

        Setting the traces replaces them wholesale. You generally don't need this, unless you're
        building something more complicated on top of a learner.

        """
        return list(self._traces)

    @traces.setter
    def traces(self, new_traces):
        self._traces = TraceSet(new_traces)

    def clear_traces(self):
        r"""

        Remove all eligibility traces, e.g. at the end of an episode. The value table is left
        untouched.

        """
        self._traces.clear()
        self.logger.debug("traces cleared")

    def update_traces(self, s, a, error, trace_discount):
        r"""

        Update the value table and the eligibility traces. This is where all learning happens.

        The update consists of the following steps:

        1. decay all traces :math:`w_i\leftarrow c\,w_i`, where :math:`c` is the trace discount;
        2. remove all traces with :math:`|w_i|<\epsilon`;
        3. update :math:`q(s_i, a_i)\leftarrow q(s_i, a_i) + \text{error}\times w_i` for each
           remaining trace;
        4. update :math:`q(s,a)\leftarrow q(s,a) + \text{error}` and add a new trace
           :math:`(s, a, 1)`.

        This is the same update as SARSA(:math:`\lambda`) with accumulating traces, the only
        difference being the trace discount :math:`c` (which is :math:`\gamma\lambda` in
        SARSA(:math:`\lambda`)).

        Parameters
        ----------
        s : int

            The state index.

        a : int

            The action taken in state ``s``.

        error : float

            The TD error, already multiplied by the learning rate.

        trace_discount : float

            The factor by which all existing traces decay.

        """
        self._traces.decay(trace_discount)
        self._traces.prune(self.epsilon)
        self._traces.apply(self._q, error)
        self._q[s, a] += error
        self._traces.append(s, a, 1.0)

    @abstractmethod
    def update(self, s, a, s_next, r, done=False):
        r"""

        Update the value table from a single transition :math:`(s, a, r, s')`.

        Parameters
        ----------
        s : int

            The state index.

        a : int

            The action taken in state ``s``.

        s_next : int

            The next state index :math:`s'`.

        r : float

            The observed reward.

        done : bool, optional

            Whether :math:`s'` is a terminal state. If so, the TD-target doesn't bootstrap and the
            traces are cleared after the update.

        Returns
        -------
        metrics : dict of scalars

            A dict of diagnostics (TD error, trace discount and number of live traces), e.g. to
            pass on to :func:`TrainMonitor.record_metrics
            <offtrace.wrappers.TrainMonitor.record_metrics>`.

        """
        pass

    @abstractmethod
    def get_trace_discount(self, s, a, s_next, r, *args):
        r"""

        Get the trace discount for the current transition. This is called exactly once per step,
        before :func:`update_traces`, and it is typically delegated to the :attr:`trace_discount`
        strategy.

        Returns
        -------
        trace_discount : float

            The factor by which all existing traces decay.

        """
        pass

    def _learn(self, s, a, r, expected_q, trace_discount, done):
        td_error = r + self.discount * expected_q - self._q[s, a]
        self.update_traces(s, a, self.learning_rate * td_error, trace_discount)
        if done:
            self.clear_traces()
        return {
            f'{self.__class__.__name__}/td_error': float(td_error),
            f'{self.__class__.__name__}/trace_discount': float(trace_discount),
            f'{self.__class__.__name__}/num_traces': len(self._traces),
        }

    def __copy__(self):
        # policies and strategy are shared, learning state is not
        new = self.__class__.__new__(self.__class__)
        new.__dict__.update(self.__dict__)
        new._q = self._q.copy()
        new._traces = TraceSet(self._traces)
        return new

    def __repr__(self):
        return (
            f"{self.__class__.__name__}("
            f"num_states={self.num_states}, num_actions={self.num_actions}, "
            f"learning_rate={self.learning_rate:g}, discount={self.discount:g}, "
            f"epsilon={self.epsilon:g}, trace_discount={self.trace_discount!r})")
