import numpy as onp

from .._base.test_case import TestCase
from .random_policy import RandomPolicy


class TestRandomPolicy(TestCase):
    def setUp(self):
        self.env = self.env_discrete

    def test_action_probabilities(self):
        pi = RandomPolicy(self.env)
        self.assertArrayAlmostEqual(pi.action_probabilities(3), onp.full(3, 1 / 3))
        self.assertAlmostEqual(pi.action_probability(3, 2), 1 / 3)

    def test_call(self):
        pi = RandomPolicy(self.env, random_seed=self.seed)
        actions = [pi(0) for _ in range(300)]
        self.assertTrue(all(self.env.action_space.contains(a) for a in actions))
        self.assertEqual(set(actions), {0, 1, 2})

    def test_call_logp(self):
        pi = RandomPolicy(self.env)
        a, logp = pi(0, return_logp=True)
        self.assertIn(a, (0, 1, 2))
        self.assertAlmostEqual(logp, -onp.log(3))

    def test_reproducible(self):
        pi1 = RandomPolicy(self.env, random_seed=13)
        pi2 = RandomPolicy(self.env, random_seed=13)
        self.assertEqual([pi1(0) for _ in range(20)], [pi2(0) for _ in range(20)])
