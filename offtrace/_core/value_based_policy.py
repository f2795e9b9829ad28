import gymnasium
import numpy as onp

from .._base.errors import InvalidArgumentError
from ..utils import docstring, is_learner
from .policy import BasePolicy


__all__ = (
    'EpsilonGreedy',
)


class EpsilonGreedy(BasePolicy):
    r"""

    Create an :math:`\epsilon`-greedy policy, given a q-function.

    This policy samples actions :math:`a\sim\pi_q(.|s)` according to the following rule:

    .. math::

        u &\sim \text{Uniform([0, 1])} \\
        a_\text{rand} &\sim \text{Uniform}(\text{actions}) \\
        a\ &=\ \left\{\begin{matrix}
            a_\text{rand} & \text{ if } u < \epsilon \\
            \arg\max_{a'} q(s,a') & \text{ otherwise }
        \end{matrix}\right.

    If multiple actions share the maximal value, the greedy probability mass is split evenly among
    them.

    Parameters
    ----------
    q : OffPolicyControl | OffPolicyEvaluation | array_like

        Either a learner, in which case the policy follows the learner's value table as it is
        updated, or a fixed value table of shape ``(num_states, num_actions)``.

    epsilon : float between 0 and 1, optional

        The probability of sampling an action uniformly at random (as opposed to sampling greedily).

    random_seed : int, optional

        Sets the random state to get reproducible results.

    """
    def __init__(self, q, epsilon=0.1, random_seed=None):
        if is_learner(q):
            observation_space, action_space = q.observation_space, q.action_space
        else:
            q = onp.array(q, dtype='float64')
            if q.ndim != 2:
                raise InvalidArgumentError(f"q must be a 2d array, got shape: {q.shape}")
            observation_space = gymnasium.spaces.Discrete(q.shape[0])
            action_space = gymnasium.spaces.Discrete(q.shape[1])
        super().__init__(observation_space, action_space, random_seed=random_seed)
        self.q_source = q
        self.epsilon = epsilon

    @property
    def epsilon(self):
        r""" The probability of sampling an action uniformly at random. """
        return self._epsilon

    @epsilon.setter
    def epsilon(self, new_epsilon):
        new_epsilon = float(new_epsilon)
        if not 0 <= new_epsilon <= 1:
            raise InvalidArgumentError(f"epsilon must be in [0, 1], got: {new_epsilon}")
        self._epsilon = new_epsilon

    @property
    def q(self):
        r""" The value table that the policy is greedy with respect to. """
        return self.q_source.q if is_learner(self.q_source) else self.q_source

    @docstring(BasePolicy.action_probabilities)
    def action_probabilities(self, s):
        q_s = self.q[s]
        probs = (q_s == q_s.max()).astype('float64')
        probs /= probs.sum()                          # there may be multiple max's (ties)
        probs *= 1 - self.epsilon                     # take away ε from greedy action(s)
        probs += self.epsilon / self.num_actions      # spread ε evenly to all actions
        return probs
