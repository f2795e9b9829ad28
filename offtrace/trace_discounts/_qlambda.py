from .._base.errors import InvalidArgumentError
from ._base import BaseTraceDiscount


__all__ = (
    'QLambda',
    'ConstantTraceDiscount',
)


class QLambda(BaseTraceDiscount):
    r"""

    Q(:math:`\lambda`) trace discounts with off-policy corrections, see `Harutyunyan et al. (2016)
    <https://arxiv.org/abs/1602.04951>`_. The traces aren't corrected for the policy mismatch at
    all:

    .. math::

        c\ =\ \gamma\,\lambda

    This is only guaranteed to converge if the target and behavior policies are sufficiently close
    to each other, relative to :math:`\lambda`.

    Parameters
    ----------
    lambda\_ : float between 0 and 1, optional

        The trace-decay parameter :math:`\lambda`.

    """
    def __init__(self, lambda_=0.9):
        lambda_ = float(lambda_)
        if not 0 <= lambda_ <= 1:
            raise InvalidArgumentError(f"lambda_ must be in [0, 1], got: {lambda_}")
        self.lambda_ = lambda_

    def evaluation(self, learner, s, a, s_next, r):
        return learner.discount * self.lambda_

    def control(self, learner, s, a, s_next, r, a_greedy):
        return learner.discount * self.lambda_


class ConstantTraceDiscount(BaseTraceDiscount):
    r"""

    A fixed trace discount that ignores the transition altogether.

    With ``value=discount`` and identical target and behavior policies, this reproduces on-policy
    TD(:math:`\lambda=1`) with accumulating traces.

    Parameters
    ----------
    value : float

        The trace discount that is returned at every step.

    """
    def __init__(self, value):
        self.value = float(value)

    def evaluation(self, learner, s, a, s_next, r):
        return self.value

    def control(self, learner, s, a, s_next, r, a_greedy):
        return self.value
