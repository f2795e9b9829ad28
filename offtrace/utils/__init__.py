r"""

Utilities
=========

This is a collection of utility (helper) functions used throughout the package.

.. autosummary::
    :nosignatures:

    offtrace.utils.check_probabilities
    offtrace.utils.docstring
    offtrace.utils.dump
    offtrace.utils.dumps
    offtrace.utils.enable_logging
    offtrace.utils.get_num_actions
    offtrace.utils.get_num_states
    offtrace.utils.is_learner
    offtrace.utils.is_policy
    offtrace.utils.load
    offtrace.utils.loads
    offtrace.utils.pretty_print
    offtrace.utils.pretty_repr


Object Reference
----------------

.. autofunction:: offtrace.utils.check_probabilities
.. autofunction:: offtrace.utils.docstring
.. autofunction:: offtrace.utils.dump
.. autofunction:: offtrace.utils.dumps
.. autofunction:: offtrace.utils.enable_logging
.. autofunction:: offtrace.utils.get_num_actions
.. autofunction:: offtrace.utils.get_num_states
.. autofunction:: offtrace.utils.is_learner
.. autofunction:: offtrace.utils.is_policy
.. autofunction:: offtrace.utils.load
.. autofunction:: offtrace.utils.loads
.. autofunction:: offtrace.utils.pretty_print
.. autofunction:: offtrace.utils.pretty_repr

"""

from ._misc import (
    docstring,
    dump,
    dumps,
    enable_logging,
    is_learner,
    is_policy,
    load,
    loads,
    pretty_print,
    pretty_repr,
)
from ._spaces import check_probabilities, get_num_actions, get_num_states


__all__ = (
    'check_probabilities',
    'docstring',
    'dump',
    'dumps',
    'enable_logging',
    'get_num_actions',
    'get_num_states',
    'is_learner',
    'is_policy',
    'load',
    'loads',
    'pretty_print',
    'pretty_repr',
)
