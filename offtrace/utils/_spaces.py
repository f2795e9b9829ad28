import gymnasium
import numpy as onp

from .._base.errors import ActionSpaceError, ObservationSpaceError, InvalidArgumentError


__all__ = (
    'check_probabilities',
    'get_num_actions',
    'get_num_states',
)


def _check_discrete(space, error_cls, name):
    if not isinstance(space, gymnasium.spaces.Discrete):
        raise error_cls(f"{name} must be a gymnasium.spaces.Discrete, got: {type(space)}")
    if int(getattr(space, 'start', 0)) != 0:
        raise error_cls(f"{name} must be zero-based, got: start={space.start}")
    return int(space.n)


def get_num_states(space):
    r"""

    Get the number of states :math:`S` of a discrete observation space.

    Parameters
    ----------
    space : gymnasium.spaces.Discrete

        A zero-based discrete observation space.

    Returns
    -------
    num_states : int

        The number of states.

    Raises
    ------
    ObservationSpaceError

        If the space isn't a zero-based :class:`gymnasium.spaces.Discrete`.

    """
    return _check_discrete(space, ObservationSpaceError, 'observation_space')


def get_num_actions(space):
    r"""

    Get the number of actions :math:`A` of a discrete action space.

    Parameters
    ----------
    space : gymnasium.spaces.Discrete

        A zero-based discrete action space.

    Returns
    -------
    num_actions : int

        The number of actions.

    Raises
    ------
    ActionSpaceError

        If the space isn't a zero-based :class:`gymnasium.spaces.Discrete`.

    """
    return _check_discrete(space, ActionSpaceError, 'action_space')


def check_probabilities(probs, shape=None, atol=1e-6):
    r"""

    Validate a (batch of) categorical distribution(s).

    Parameters
    ----------
    probs : array_like

        Probabilities over the last axis, e.g. a table of shape ``(num_states, num_actions)``.

    shape : tuple of ints, optional

        The expected shape of ``probs``.

    atol : float, optional

        Absolute tolerance for the rows summing to one.

    Returns
    -------
    probs : ndarray

        The validated probabilities as a float array.

    Raises
    ------
    InvalidArgumentError

        If the shape is off, any entry is negative or non-finite, or any row doesn't sum to one.

    """
    probs = onp.asarray(probs, dtype='float64')
    if shape is not None and probs.shape != tuple(shape):
        raise InvalidArgumentError(f"probs must have shape {tuple(shape)}, got: {probs.shape}")
    if not onp.all(onp.isfinite(probs)) or onp.any(probs < 0):
        raise InvalidArgumentError("probs must be finite and non-negative")
    if not onp.allclose(probs.sum(axis=-1), 1, atol=atol):
        raise InvalidArgumentError("probs must sum to 1 along the last axis")
    return probs
