from ..utils import check_probabilities, docstring
from .policy import BasePolicy


__all__ = (
    'TabularPolicy',
)


class TabularPolicy(BasePolicy):
    r"""

    A policy that is given explicitly as a table of propensities :math:`\pi(a|s)`.

    Parameters
    ----------
    env : gymnasium.Env

        The gymnasium-style environment. This is only used to get the :code:`env.observation_space`
        and :code:`env.action_space`.

    probs : array_like, shape: [num_states, num_actions]

        The propensities :math:`\pi(a|s)`. Each row must be a probability distribution.

    random_seed : int, optional

        Sets the random state to get reproducible results.

    """
    def __init__(self, env, probs, random_seed=None):
        super().__init__(env.observation_space, env.action_space, random_seed=random_seed)
        self.probs = probs

    @property
    def probs(self):
        r""" The table of propensities :math:`\pi(a|s)` (read-only). """
        return self._probs

    @probs.setter
    def probs(self, new_probs):
        new_probs = check_probabilities(new_probs, shape=(self.num_states, self.num_actions))
        new_probs = new_probs / new_probs.sum(axis=1, keepdims=True)  # exact row sums for sampling
        new_probs.flags.writeable = False
        self._probs = new_probs

    @docstring(BasePolicy.action_probabilities)
    def action_probabilities(self, s):
        return self._probs[s]

    @docstring(BasePolicy.action_probability)
    def action_probability(self, s, a):
        return float(self._probs[s, a])
