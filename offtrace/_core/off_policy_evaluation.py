from .._base.errors import InvalidArgumentError
from ..utils import docstring, is_policy
from .base_off_policy import BaseOffPolicy


__all__ = (
    'OffPolicyEvaluation',
)


class OffPolicyEvaluation(BaseOffPolicy):
    r"""

    Off-policy evaluation with eligibility traces.

    This learner estimates the q-function of a given target policy :math:`\pi_\text{targ}`, while
    the experience is generated by another policy :math:`\pi_\text{behavior}`. The TD-target is the
    expected-SARSA target under the target policy:

    .. math::

        G_t\ =\ R_t + \gamma\,\sum_{a'}\pi_\text{targ}(a'|S_{t+1})\,q(S_{t+1}, a')

    The mismatch between the two policies is accounted for by the trace discount, see
    :mod:`offtrace.trace_discounts`.

    Keep in mind that these methods aren't very data-efficient when either the target or the
    behavior policy is (close to) deterministic. Importance-weighted trace discounts then cut the
    traces short, which amounts to discarding data (this is necessary for correctness, though).

    Parameters
    ----------
    pi_targ : BasePolicy

        The target policy, i.e. the policy whose q-function we wish to learn.

    pi_behavior : BasePolicy

        The behavior policy, i.e. the policy that generates the experience.

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
            self, pi_targ, pi_behavior, discount=1.0, learning_rate=0.1, epsilon=0.001,
            trace_discount=None, q=None):

        super().__init__(
            pi_behavior=pi_behavior,
            discount=discount,
            learning_rate=learning_rate,
            epsilon=epsilon,
            trace_discount=trace_discount,
            q=q)

        if not is_policy(pi_targ):
            raise TypeError(f"pi_targ must be a policy, got: {type(pi_targ)}")
        if (pi_targ.num_states, pi_targ.num_actions) != (self.num_states, self.num_actions):
            raise InvalidArgumentError(
                "pi_targ and pi_behavior must have the same number of states and actions, got: "
                f"{(pi_targ.num_states, pi_targ.num_actions)} != "
                f"{(self.num_states, self.num_actions)}")
        self.pi_targ = pi_targ

    @docstring(BaseOffPolicy.update)
    def update(self, s, a, s_next, r, done=False):
        expected_q = 0.0
        if not done:
            expected_q = float(self._q[s_next] @ self.pi_targ.action_probabilities(s_next))
        trace_discount = self.get_trace_discount(s, a, s_next, r)
        return self._learn(s, a, r, expected_q, trace_discount, done)

    def get_trace_discount(self, s, a, s_next, r):
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

        Returns
        -------
        trace_discount : float

            The factor by which all existing traces decay.

        """
        return self.trace_discount.evaluation(self, s, a, s_next, r)
