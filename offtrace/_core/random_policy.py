import numpy as onp

from ..utils import docstring
from .policy import BasePolicy


__all__ = (
    'RandomPolicy',
)


class RandomPolicy(BasePolicy):
    r"""

    A simple random policy, i.e. :math:`\pi(a|s)=1/A` for all :math:`s` and :math:`a`.

    Parameters
    ----------
    env : gymnasium.Env

        The gymnasium-style environment. This is only used to get the :code:`env.observation_space`
        and :code:`env.action_space`.

    random_seed : int, optional

        Sets the random state to get reproducible results.

    """
    def __init__(self, env, random_seed=None):
        super().__init__(env.observation_space, env.action_space, random_seed=random_seed)

    @docstring(BasePolicy.action_probabilities)
    def action_probabilities(self, s):
        return onp.full(self.num_actions, 1 / self.num_actions)

    @docstring(BasePolicy.action_probability)
    def action_probability(self, s, a):
        return 1 / self.num_actions
