import pytest

from .._base.errors import InvalidArgumentError
from .._base.test_case import DiscreteEnv
from .._core.off_policy_evaluation import OffPolicyEvaluation
from .._core.random_policy import RandomPolicy
from ._base import BaseTraceDiscount, BaseProbaTraceDiscount
from ._retrace import RetraceLambda
from ._qlambda import ConstantTraceDiscount


class Halve(BaseProbaTraceDiscount):
    def discount_from_proba(self, learner, p_targ, p_behavior):
        return 0.5


def test_abstract():
    with pytest.raises(TypeError):
        BaseTraceDiscount()
    with pytest.raises(TypeError):
        BaseProbaTraceDiscount()


def test_ratio():
    assert BaseProbaTraceDiscount.ratio(0.2, 0.5) == pytest.approx(0.4)
    assert BaseProbaTraceDiscount.ratio(0.9, 0.3) == pytest.approx(3.)


def test_ratio_zero_behavior_proba():
    assert BaseProbaTraceDiscount.ratio(0.7, 0.) == 0.


@pytest.mark.parametrize('lambda_', [-0.1, 1.1])
def test_invalid_lambda(lambda_):
    with pytest.raises(InvalidArgumentError, match=r"lambda_ must be in \[0, 1\]"):
        Halve(lambda_=lambda_)


def test_repr():
    assert repr(Halve(lambda_=0.3)) == "Halve(lambda_=0.3)"
    assert repr(RetraceLambda()) == "RetraceLambda(lambda_=0.9)"


def test_trace_discount_includes_discount_factor():
    pi = RandomPolicy(DiscreteEnv(13))
    learner = OffPolicyEvaluation(pi, pi, discount=0.5, trace_discount=ConstantTraceDiscount(1.))
    learner.update(0, 0, 1, 0.)
    learner.update(1, 1, 2, 0.)

    # the learner applies the returned factor as is, without multiplying by the discount
    assert learner.traces == [(0, 0, 1.), (1, 1, 1.)]

    learner.trace_discount = Halve()
    learner.update(2, 2, 3, 0.)
    assert [t.weight for t in learner.traces] == [0.5, 0.5, 1.]
