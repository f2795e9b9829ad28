import numpy as onp

from .._base.errors import InvalidArgumentError
from ..utils import docstring
from .base_off_policy import BaseOffPolicy


__all__ = (
    'OffPolicyControl',
)


class OffPolicyControl(BaseOffPolicy):
    r"""

    Off-policy control with eligibility traces.

    This learner estimates the optimal q-function, while the experience is generated by a behavior
    policy :math:`\pi_\text{behavior}` (this is what Q-learning does, for example). Since the
    optimal policy is greedy, which would cut the importance-weighted traces almost immediately,
    the target policy is taken to be :math:`\epsilon`-greedy with respect to the current value
    table. Its greedy action :math:`a^*=\arg\max_{a}q(s,a)` is picked with probability
    :math:`\xi + (1-\xi)/A` and every other action with probability :math:`(1-\xi)/A`, where
    :math:`\xi` is the :attr:`exploration` parameter. The TD-target is the expectation under this
    policy:

    .. math::

        G_t\ =\ R_t + \gamma\,\left(
            \frac{1-\xi}{A}\sum_{a'}q(S_{t+1}, a') + \xi\,q(S_{t+1}, a^*)\right)

    Increase :math:`\xi` towards 1 over time in order to converge to the optimal q-function.

    Note that :attr:`exploration` is the *greedy* fraction, which is not to be confused with the
    trace cutoff :attr:`epsilon`.

    Parameters
    ----------
    pi_behavior : BasePolicy

        The behavior policy, i.e. the policy that generates the experience.

    exploration : float between 0 and 1, optional

        The probability :math:`\xi` with which the implicit target policy acts greedily.

    discount : float, optional

        The discount factor :math:`\gamma`.

    learning_rate : float, optional

        The learning rate :math:`\alpha\in(0, 1]`.

    epsilon : positive float, optional

        The trace cutoff :math:`\epsilon`.

    trace_discount : BaseTraceDiscount, optional

        The strategy that computes the trace discount at each step. The default is
        :class:`ImportanceSampling <offtrace.trace_discounts.ImportanceSampling>`.

    q : array_like, shape: [num_states, num_actions], optional

        The initial value table. If left unspecified, the table is initialized with zeros.

    """
    def __init__(
            self, pi_behavior, exploration=0.9, discount=1.0, learning_rate=0.1, epsilon=0.001,
            trace_discount=None, q=None):

        super().__init__(
            pi_behavior=pi_behavior,
            discount=discount,
            learning_rate=learning_rate,
            epsilon=epsilon,
            trace_discount=trace_discount,
            q=q)
        self.exploration = exploration

    @property
    def exploration(self):
        r"""

        The probability :math:`\xi` with which the implicit target policy picks the greedy action
        (on top of its uniform share :math:`(1-\xi)/A`).

        Setting a value outside of :math:`[0, 1]` raises an :class:`InvalidArgumentError
        <offtrace.InvalidArgumentError>`, leaving the current value untouched.

        """
        return self._exploration

    @exploration.setter
    def exploration(self, new_exploration):
        new_exploration = float(new_exploration)
        if not 0 <= new_exploration <= 1:
            raise InvalidArgumentError(f"exploration must be in [0, 1], got: {new_exploration}")
        self._exploration = new_exploration
        self.logger.debug(f"exploration set to {new_exploration:g}")

    def target_probability(self, a, a_greedy):
        r"""

        The propensity of an action under the implicit :math:`\epsilon`-greedy target policy.

        Parameters
        ----------
        a : int

            An action index.

        a_greedy : int

            The greedy action.

        Returns
        -------
        p : float

            The target propensity :math:`(1-\xi)/A + \xi\,\mathbb{1}[a=a^*]`.

        """
        return (1 - self.exploration) / self.num_actions + (a == a_greedy) * self.exploration

    @docstring(BaseOffPolicy.update)
    def update(self, s, a, s_next, r, done=False):
        q_next = self._q[s_next]
        a_greedy = int(onp.argmax(q_next))  # ties go to the lowest index
        expected_q = 0.0
        if not done:
            expected_q = (
                (1 - self.exploration) / self.num_actions * float(onp.sum(q_next))
                + self.exploration * float(q_next[a_greedy]))
        trace_discount = self.get_trace_discount(s, a, s_next, r, a_greedy)
        return self._learn(s, a, r, expected_q, trace_discount, done)

    def get_trace_discount(self, s, a, s_next, r, a_greedy):
        r"""

        Get the trace discount for the current transition from the trace-discount strategy.

        Parameters
        ----------
        s : int

            The state index.

        a : int

            The action taken in state ``s``.

        s_next : int

            The next state index.

        r : float

            The observed reward.

        a_greedy : int

            The greedy action :math:`\arg\max_{a'}q(s_\text{next}, a')`.

        Returns
        -------
        trace_discount : float

            The factor by which all existing traces decay.

        """
        return self.trace_discount.control(self, s, a, s_next, r, a_greedy)
