__version__ = '0.1.0'

# expose specific classes and functions
from ._base.errors import (
    OfftraceError, InvalidArgumentError, SpaceError, ActionSpaceError, ObservationSpaceError)
from ._core.trace_set import Trace, TraceSet
from ._core.base_off_policy import BaseOffPolicy
from ._core.off_policy_evaluation import OffPolicyEvaluation
from ._core.off_policy_control import OffPolicyControl
from ._core.policy import BasePolicy
from ._core.random_policy import RandomPolicy
from ._core.tabular_policy import TabularPolicy
from ._core.value_based_policy import EpsilonGreedy
from .utils import enable_logging

# pre-load submodules
from . import trace_discounts
from . import utils
from . import wrappers


__all__ = (

    # classes and functions
    'BaseOffPolicy',
    'OffPolicyEvaluation',
    'OffPolicyControl',
    'Trace',
    'TraceSet',
    'BasePolicy',
    'RandomPolicy',
    'TabularPolicy',
    'EpsilonGreedy',
    'enable_logging',

    # exceptions
    'OfftraceError',
    'InvalidArgumentError',
    'SpaceError',
    'ActionSpaceError',
    'ObservationSpaceError',

    # modules
    'trace_discounts',
    'utils',
    'wrappers',
)


# -----------------------------------------------------------------------------
# register envs
# -----------------------------------------------------------------------------

import gymnasium as _gymnasium  # noqa: E402

if 'FrozenLakeNonSlippery-v0' in _gymnasium.envs.registry:
    del _gymnasium.envs.registry['FrozenLakeNonSlippery-v0']

_gymnasium.envs.register(
    id='FrozenLakeNonSlippery-v0',
    entry_point='gymnasium.envs.toy_text:FrozenLakeEnv',
    kwargs={'map_name': '4x4', 'is_slippery': False},
    max_episode_steps=20,
    reward_threshold=0.99,
)

del _gymnasium  # Keep namespace clean.
