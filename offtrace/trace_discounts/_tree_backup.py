from ._base import BaseProbaTraceDiscount


__all__ = (
    'TreeBackupLambda',
)


class TreeBackupLambda(BaseProbaTraceDiscount):
    r"""

    Tree-backup(:math:`\lambda`) trace discounts, see Precup, Sutton & Singh (2000), *Eligibility
    Traces for Off-Policy Policy Evaluation*:

    .. math::

        c\ =\ \gamma\,\lambda\,\pi_\text{targ}(a|s)

    This doesn't depend on the behavior policy at all, which makes it safe but also means that it
    cuts traces aggressively when the target policy is close to deterministic.

    Parameters
    ----------
    lambda\_ : float between 0 and 1, optional

        The trace-decay parameter :math:`\lambda`.

    """
    def __init__(self, lambda_=0.9):
        super().__init__(lambda_=lambda_)

    def discount_from_proba(self, learner, p_targ, p_behavior):
        return learner.discount * self.lambda_ * float(p_targ)
