from abc import ABC, abstractmethod

from .._base.errors import InvalidArgumentError


__all__ = (
    'BaseTraceDiscount',
    'BaseProbaTraceDiscount',
)


class BaseTraceDiscount(ABC):
    r"""

    Abstract base class for trace-discount strategies.

    A trace-discount strategy decides how much credit the previously visited state-action pairs
    retain after each step. It is queried exactly once per step, before the learner updates its
    traces. Concrete off-policy algorithms (importance sampling, Retrace(:math:`\lambda`), etc.)
    differ only in this factor, which is why they share a single learner implementation.

    The returned factor is the *full* trace discount, so it must already include the discount
    factor :math:`\gamma`, e.g. ``learner.discount * rho``. The learner doesn't multiply by
    :math:`\gamma` again.

    """
    @abstractmethod
    def evaluation(self, learner, s, a, s_next, r):
        r"""

        Compute the trace discount for a policy-evaluation step.

        Parameters
        ----------
        learner : OffPolicyEvaluation

            The learner that requests the trace discount.

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

            The factor by which all existing traces are multiplied. This includes the discount
            factor, i.e. a strategy that ignores ``learner.discount`` also ignores :math:`\gamma`.

        """
        pass

    @abstractmethod
    def control(self, learner, s, a, s_next, r, a_greedy):
        r"""

        Compute the trace discount for a control step.

        Parameters
        ----------
        learner : OffPolicyControl

            The learner that requests the trace discount.

        s : int

            The state index.

        a : int

            The action taken in state ``s``.

        s_next : int

            The next state index.

        r : float

            The observed reward.

        a_greedy : int

            The greedy action :math:`\arg\max_{a'}q(s_\text{next}, a')` that was computed by the
            learner.

        Returns
        -------
        trace_discount : float

            The factor by which all existing traces are multiplied. This includes the discount
            factor, i.e. a strategy that ignores ``learner.discount`` also ignores :math:`\gamma`.

        """
        pass

    def __repr__(self):
        params = ', '.join(f'{k}={v!r}' for k, v in vars(self).items())
        return f"{self.__class__.__name__}({params})"


class BaseProbaTraceDiscount(BaseTraceDiscount):
    r"""

    Abstract base class for trace-discount strategies that depend on the target and behavior
    propensities of the action that was taken.

    In evaluation mode, the target propensity is :math:`\pi_\text{targ}(a|s)`. In control mode, the
    target policy is the implicit :math:`\epsilon`-greedy policy of the learner, see
    :func:`OffPolicyControl.target_probability <offtrace.OffPolicyControl.target_probability>`.

    Parameters
    ----------
    lambda\_ : float between 0 and 1, optional

        The trace-decay parameter :math:`\lambda`. This is ignored by strategies that don't use it.

    """
    def __init__(self, lambda_=1.0):
        lambda_ = float(lambda_)
        if not 0 <= lambda_ <= 1:
            raise InvalidArgumentError(f"lambda_ must be in [0, 1], got: {lambda_}")
        self.lambda_ = lambda_

    def evaluation(self, learner, s, a, s_next, r):
        p_targ = learner.pi_targ.action_probability(s, a)
        p_behavior = learner.pi_behavior.action_probability(s, a)
        return self.discount_from_proba(learner, p_targ, p_behavior)

    def control(self, learner, s, a, s_next, r, a_greedy):
        p_targ = learner.target_probability(a, a_greedy)
        p_behavior = learner.pi_behavior.action_probability(s, a)
        return self.discount_from_proba(learner, p_targ, p_behavior)

    @abstractmethod
    def discount_from_proba(self, learner, p_targ, p_behavior):
        r"""

        Compute the trace discount from the propensities of the action that was taken.

        Parameters
        ----------
        learner : BaseOffPolicy

            The learner that requests the trace discount.

        p_targ : float

            The target propensity of the action.

        p_behavior : float

            The behavior propensity of the action.

        Returns
        -------
        trace_discount : float

            The factor by which all existing traces are multiplied. This includes the discount
            factor, i.e. a strategy that ignores ``learner.discount`` also ignores :math:`\gamma`.

        """
        pass

    @staticmethod
    def ratio(p_targ, p_behavior):
        r"""

        The importance weight :math:`\rho=\pi_\text{targ}(a|s)/\pi_\text{behavior}(a|s)`.

        An action with zero behavior propensity can't have been sampled by the behavior policy. We
        return :math:`\rho=0` in that case, which cuts the traces instead of dividing by zero.

        """
        if p_behavior <= 0:
            return 0.0
        return float(p_targ) / float(p_behavior)
