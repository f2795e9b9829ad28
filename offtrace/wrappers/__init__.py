r"""
Wrappers
========

.. autosummary::
    :nosignatures:

    offtrace.wrappers.TrainMonitor

----

Gymnasium provides a nice modular interface to extend existing environments using `environment
wrappers <https://gymnasium.farama.org/api/wrappers/>`_. The wrapper that you'll probably want to
use is :class:`offtrace.wrappers.TrainMonitor`. It wraps the environment in a way that we can view
our training logs easily. It uses both the standard :py:mod:`logging` module as well as tensorboard
through the `tensorboardX <https://tensorboardx.readthedocs.io/>`_ package.


Object Reference
----------------

.. autoclass:: offtrace.wrappers.TrainMonitor


"""

from ._train_monitor import TrainMonitor


__all__ = (
    'TrainMonitor',
)
