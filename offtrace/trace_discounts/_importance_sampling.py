from ._base import BaseProbaTraceDiscount


__all__ = (
    'ImportanceSampling',
)


class ImportanceSampling(BaseProbaTraceDiscount):
    r"""

    Per-decision importance sampling. The traces are discounted by:

    .. math::

        c\ =\ \gamma\,\frac{\pi_\text{targ}(a|s)}{\pi_\text{behavior}(a|s)}

    This is the unbiased correction for the mismatch between the target and behavior policies.
    Its variance is unbounded though: when the behavior policy rarely picks an action that the
    target policy favors, :math:`c` can be much larger than one. The only thing that keeps the
    traces bounded in that case is the trace cutoff :math:`\epsilon` of the learner.

    """
    def __init__(self):
        super().__init__(lambda_=1.0)

    def discount_from_proba(self, learner, p_targ, p_behavior):
        return learner.discount * self.ratio(p_targ, p_behavior)

    def __repr__(self):
        return f"{self.__class__.__name__}()"
