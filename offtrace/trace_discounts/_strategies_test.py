import pytest

from .._base.test_case import TestCase, DiscreteEnv
from .._core.off_policy_control import OffPolicyControl
from .._core.off_policy_evaluation import OffPolicyEvaluation
from .._core.random_policy import RandomPolicy
from .._core.tabular_policy import TabularPolicy
from ._importance_sampling import ImportanceSampling
from ._qlambda import QLambda, ConstantTraceDiscount
from ._retrace import RetraceLambda
from ._tree_backup import TreeBackupLambda


class TestTraceDiscounts(TestCase):
    def setUp(self):
        env = self.env_two_states
        self.pi_targ = TabularPolicy(env, [[0.8, 0.2], [0., 1.]])
        self.pi_behavior = TabularPolicy(env, [[0.4, 0.6], [0.5, 0.5]])
        self.evaluation = OffPolicyEvaluation(self.pi_targ, self.pi_behavior, discount=0.9)
        self.control = OffPolicyControl(self.pi_behavior, exploration=0.6, discount=0.9)

    def tearDown(self):
        del self.pi_targ, self.pi_behavior, self.evaluation, self.control

    def test_importance_sampling(self):
        strategy = ImportanceSampling()
        self.assertAlmostEqual(strategy.evaluation(self.evaluation, 0, 0, 1, 0.), 0.9 * 2.)
        self.assertAlmostEqual(strategy.evaluation(self.evaluation, 0, 1, 1, 0.), 0.9 / 3)
        self.assertAlmostEqual(strategy.evaluation(self.evaluation, 1, 0, 1, 0.), 0.)

        # control: p_targ = 0.2 + 0.6 for the greedy action, 0.2 otherwise
        self.assertAlmostEqual(strategy.control(self.control, 0, 0, 1, 0., 0), 0.9 * 0.8 / 0.4)
        self.assertAlmostEqual(strategy.control(self.control, 0, 1, 1, 0., 0), 0.9 * 0.2 / 0.6)

    def test_retrace(self):
        strategy = RetraceLambda(lambda_=0.5)
        self.assertAlmostEqual(strategy.evaluation(self.evaluation, 0, 0, 1, 0.), 0.9 * 0.5)
        self.assertAlmostEqual(strategy.evaluation(self.evaluation, 0, 1, 1, 0.), 0.9 * 0.5 / 3)
        self.assertAlmostEqual(strategy.control(self.control, 0, 0, 1, 0., 0), 0.9 * 0.5)
        self.assertAlmostEqual(
            strategy.control(self.control, 0, 1, 1, 0., 0), 0.9 * 0.5 * 0.2 / 0.6)

    def test_tree_backup(self):
        strategy = TreeBackupLambda(lambda_=0.5)
        self.assertAlmostEqual(strategy.evaluation(self.evaluation, 0, 0, 1, 0.), 0.9 * 0.5 * 0.8)
        self.assertAlmostEqual(strategy.evaluation(self.evaluation, 1, 1, 1, 0.), 0.9 * 0.5)
        self.assertAlmostEqual(strategy.control(self.control, 0, 1, 1, 0., 1), 0.9 * 0.5 * 0.8)

    def test_qlambda(self):
        strategy = QLambda(lambda_=0.5)
        self.assertAlmostEqual(strategy.evaluation(self.evaluation, 1, 0, 1, 0.), 0.9 * 0.5)
        self.assertAlmostEqual(strategy.control(self.control, 0, 1, 1, 0., 0), 0.9 * 0.5)

    def test_constant(self):
        strategy = ConstantTraceDiscount(0.25)
        self.assertEqual(strategy.evaluation(self.evaluation, 0, 0, 1, 0.), 0.25)
        self.assertEqual(strategy.control(self.control, 0, 0, 1, 0., 1), 0.25)

    def test_retrace_never_exceeds_qlambda(self):
        retrace, qlambda = RetraceLambda(lambda_=0.7), QLambda(lambda_=0.7)
        for s in range(2):
            for a in range(2):
                self.assertLessEqual(
                    retrace.evaluation(self.evaluation, s, a, 0, 0.),
                    qlambda.evaluation(self.evaluation, s, a, 0, 0.) + 1e-12)


def test_zero_behavior_proba_cuts_traces():
    env = DiscreteEnv(13, num_states=2, num_actions=2)
    pi_targ = RandomPolicy(env)
    pi_behavior = TabularPolicy(env, [[1., 0.], [1., 0.]])
    learner = OffPolicyEvaluation(pi_targ, pi_behavior, trace_discount=ImportanceSampling())
    learner.update(0, 0, 1, 1.)
    learner.update(1, 1, 0, 1.)
    assert learner.traces == [(1, 1, 1.)]
    assert learner.q[0, 0] == pytest.approx(0.1)


@pytest.mark.parametrize('cls', [RetraceLambda, TreeBackupLambda, QLambda])
def test_default_lambda(cls):
    assert cls().lambda_ == 0.9
