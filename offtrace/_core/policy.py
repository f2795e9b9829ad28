from abc import ABC, abstractmethod

import numpy as onp

from .._base.mixins import RandomStateMixin
from ..utils import get_num_actions, get_num_states


__all__ = (
    'BasePolicy',
)


class BasePolicy(ABC, RandomStateMixin):
    r"""

    Abstract base class for tabular policies :math:`\pi(a|s)`.

    A policy must be able to report the propensity :math:`\pi(a|s)` of any action in any state.
    This is all that the learners ever ask of a policy; sampling is left to the code that interacts
    with the environment.

    Parameters
    ----------
    observation_space : gymnasium.spaces.Discrete

        The (zero-based) space of state indices.

    action_space : gymnasium.spaces.Discrete

        The (zero-based) space of action indices.

    random_seed : int, optional

        Sets the random state to get reproducible results.

    """
    def __init__(self, observation_space, action_space, random_seed=None):
        self.num_states = get_num_states(observation_space)
        self.num_actions = get_num_actions(action_space)
        self.observation_space = observation_space
        self.action_space = action_space
        self.random_seed = random_seed

    @abstractmethod
    def action_probabilities(self, s):
        r"""

        Get the full conditional distribution :math:`\pi(.|s)`.

        Parameters
        ----------
        s : int

            A state index.

        Returns
        -------
        probs : ndarray, shape: [num_actions]

            The propensities of all actions.

        """
        pass

    def action_probability(self, s, a):
        r"""

        Get the propensity :math:`\pi(a|s)` of a single action.

        Parameters
        ----------
        s : int

            A state index.

        a : int

            An action index.

        Returns
        -------
        p : float

            The propensity :math:`\pi(a|s)`.

        """
        return float(self.action_probabilities(s)[a])

    def __call__(self, s, return_logp=False):
        r"""

        Sample an action :math:`a\sim\pi(.|s)`.

        Parameters
        ----------
        s : int

            A state index.

        return_logp : bool, optional

            Whether to return the log-propensity :math:`\log\pi(a|s)`.

        Returns
        -------
        a : int

            A single action index.

        logp : float, optional

            The log-propensity :math:`\log\pi(a|s)`. This is only returned if we set
            ``return_logp=True``.

        """
        probs = self.action_probabilities(s)
        a = int(self.rnd.choice(self.num_actions, p=probs))
        return (a, float(onp.log(probs[a]))) if return_logp else a

    def mode(self, s):
        r"""

        Get the most probable action :math:`a=\arg\max_a\pi(a|s)`. Ties are broken in favor of
        the lowest action index.

        Parameters
        ----------
        s : int

            A state index.

        Returns
        -------
        a : int

            A single action index.

        """
        return int(onp.argmax(self.action_probabilities(s)))
