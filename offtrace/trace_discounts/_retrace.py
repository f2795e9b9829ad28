from ._base import BaseProbaTraceDiscount


__all__ = (
    'RetraceLambda',
)


class RetraceLambda(BaseProbaTraceDiscount):
    r"""

    Retrace(:math:`\lambda`) trace discounts, see `Munos et al. (2016)
    <https://arxiv.org/abs/1606.02647>`_. The importance weights are truncated at one:

    .. math::

        c\ =\ \gamma\,\lambda\,\min\left(1, \rho\right),\qquad
        \rho\ =\ \frac{\pi_\text{targ}(a|s)}{\pi_\text{behavior}(a|s)}

    which keeps the traces bounded (:math:`c\leq\gamma\lambda`) while remaining safe for arbitrary
    behavior policies.

    Parameters
    ----------
    lambda\_ : float between 0 and 1, optional

        The trace-decay parameter :math:`\lambda`.

    """
    def __init__(self, lambda_=0.9):
        super().__init__(lambda_=lambda_)

    def discount_from_proba(self, learner, p_targ, p_behavior):
        return learner.discount * self.lambda_ * min(1.0, self.ratio(p_targ, p_behavior))
