r"""
Trace Discounts
===============

.. autosummary::
    :nosignatures:

    offtrace.trace_discounts.ImportanceSampling
    offtrace.trace_discounts.RetraceLambda
    offtrace.trace_discounts.TreeBackupLambda
    offtrace.trace_discounts.QLambda
    offtrace.trace_discounts.ConstantTraceDiscount

----

This is a collection of strategies that decide how fast the eligibility traces of an off-policy
learner decay. After each step, every trace :math:`(s_i, a_i, w_i)` is updated as
:math:`w_i\leftarrow c\,w_i`, where the trace discount :math:`c` depends on the transition
:math:`(s, a, r, s')` that was just observed. Traces whose weight drops below the learner's cutoff
:math:`\epsilon` are discarded.

The different off-policy algorithms in this module only differ in the choice of :math:`c`, which
is why they all share the same learners :class:`offtrace.OffPolicyEvaluation` and
:class:`offtrace.OffPolicyControl`. For instance, learning the optimal q-function with
Retrace(:math:`\lambda`) looks like:

.. code:: python

    learner = offtrace.OffPolicyControl(
        pi_behavior, trace_discount=offtrace.trace_discounts.RetraceLambda(lambda_=0.9))

To implement a new algorithm, derive from
:class:`BaseTraceDiscount <offtrace.trace_discounts.BaseTraceDiscount>` (or from
:class:`BaseProbaTraceDiscount <offtrace.trace_discounts.BaseProbaTraceDiscount>` if the discount
only depends on the target and behavior propensities of the action taken). Note that the returned
factor is the complete trace discount :math:`c`, including the discount factor :math:`\gamma`. For
instance, plain importance sampling returns ``learner.discount * p_targ / p_behavior``.


Object Reference
----------------

.. autoclass:: offtrace.trace_discounts.ImportanceSampling
.. autoclass:: offtrace.trace_discounts.RetraceLambda
.. autoclass:: offtrace.trace_discounts.TreeBackupLambda
.. autoclass:: offtrace.trace_discounts.QLambda
.. autoclass:: offtrace.trace_discounts.ConstantTraceDiscount
.. autoclass:: offtrace.trace_discounts.BaseTraceDiscount
.. autoclass:: offtrace.trace_discounts.BaseProbaTraceDiscount


"""

from ._base import BaseTraceDiscount, BaseProbaTraceDiscount
from ._importance_sampling import ImportanceSampling
from ._retrace import RetraceLambda
from ._tree_backup import TreeBackupLambda
from ._qlambda import QLambda, ConstantTraceDiscount


__all__ = (
    'BaseTraceDiscount',
    'BaseProbaTraceDiscount',
    'ImportanceSampling',
    'RetraceLambda',
    'TreeBackupLambda',
    'QLambda',
    'ConstantTraceDiscount',
)
