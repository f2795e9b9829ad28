import os
import logging
from collections.abc import Mapping

import numpy as onp
import lz4.frame
import cloudpickle as pickle


__all__ = (
    'docstring',
    'enable_logging',
    'dump',
    'dumps',
    'load',
    'loads',
    'is_learner',
    'is_policy',
    'pretty_repr',
    'pretty_print',
)


def docstring(obj):
    r"""

    Decorator that copies the docstring of ``obj`` onto the decorated function, e.g. to document
    an overridden method with the docstring of the abstract method it implements:

    .. code:: python

        @docstring(BaseOffPolicy.update)
        def update(self, s, a, s_next, r, done=False):
            ...

    Parameters
    ----------
    obj : object

        The object whose ``__doc__`` is copied.

    """
    def decorator(func):
        func.__doc__ = obj.__doc__
        return func
    return decorator


def enable_logging(name=None, level=logging.INFO, output_filepath=None, output_level=None):
    r"""

    Send log messages to stderr and, optionally, to a file.

    The learners log parameter changes at DEBUG level, while :class:`TrainMonitor
    <offtrace.wrappers.TrainMonitor>` logs one INFO line per episode. The format is
    ``[name|logger|level] message``, e.g. ``[worker-1|TrainMonitor|INFO] ep: 13, ...``.

    Parameters
    ----------
    name : str, optional

        A prefix for every log line, useful to tell apart multiple training processes.

    level : int, optional

        The level of the stderr handler that is installed on the root logger via
        :func:`logging.basicConfig`. Use ``logging.DEBUG`` to see the learners' messages.

    output_filepath : str, optional

        If provided, a :py:class:`logging.FileHandler` that writes to this path is added to the
        root logger. Missing directories are created.

    output_level : int, optional

        The level of the file handler. Defaults to ``level``.

    """
    fmt = '[%(name)s|%(levelname)s] %(message)s'
    if name is not None:
        fmt = f'[{name}|%(name)s|%(levelname)s] %(message)s'
    logging.basicConfig(level=level, format=fmt)
    if output_filepath is None:
        return
    os.makedirs(os.path.dirname(output_filepath) or '.', exist_ok=True)
    file_handler = logging.FileHandler(output_filepath)
    file_handler.setLevel(level if output_level is None else output_level)
    logging.getLogger('').addHandler(file_handler)


def dump(obj, filepath):
    r"""

    Save an object to disk.

    Parameters
    ----------
    obj : object

        Any python object, e.g. a learner or its value table.

    filepath : str

        Where to store the instance.

    Warning
    -------

    References between objects are only preserved if they are stored as part of a single object, for
    example:

    .. code:: python

        # the epsilon-greedy policy reads the learner's value table
        pi = offtrace.EpsilonGreedy(learner, epsilon=0.1)

        # references preserved
        dump((learner, pi), 'checkpoint.pkl.lz4')
        learner_new, pi_new = load('checkpoint.pkl.lz4')
        assert pi_new.q_source is learner_new

        # references not preserved
        dump(learner, 'learner.pkl.lz4')
        dump(pi, 'pi.pkl.lz4')
        learner_new = load('learner.pkl.lz4')
        pi_new = load('pi.pkl.lz4')
        assert pi_new.q_source is not learner_new  # <-- pi_new follows a stale copy!!

    Therefore, the safest way to create checkpoints is to store the entire state as a single object
    like a dict or a tuple.

    """
    dirpath = os.path.dirname(filepath)
    if dirpath:
        os.makedirs(dirpath, exist_ok=True)
    with lz4.frame.open(filepath, 'wb') as f:
        f.write(pickle.dumps(obj))


def dumps(obj):
    r"""

    Serialize an object to an lz4-compressed pickle byte-string.

    Parameters
    ----------
    obj : object

        Any python object.

    Returns
    -------
    s : bytes

        An lz4-compressed pickle byte-string.

    Warning
    -------

    References between objects are only preserved if they are stored as part of a single object,
    see :func:`dump <offtrace.utils.dump>`.

    """
    return lz4.frame.compress(pickle.dumps(obj))


def load(filepath):
    r"""

    Load an object from a file that was created by :func:`dump(obj, filepath) <dump>`.

    Parameters
    ----------
    filepath : str

        File to load.

    """
    with lz4.frame.open(filepath, 'rb') as f:
        return pickle.loads(f.read())


def loads(s):
    r"""

    Load an object from a byte-string that was created by :func:`dumps(obj) <dumps>`.

    Parameters
    ----------
    s : str

        An lz4-compressed pickle byte-string.

    """
    return pickle.loads(lz4.frame.decompress(s))


def is_policy(obj):
    r"""

    Check whether an object implements the policy interface, i.e. whether it can report the
    probability of taking an action in a given state.

    Parameters
    ----------
    obj

        Object to check.

    Returns
    -------
    bool

        Whether ``obj`` is a policy.

    """
    # import at runtime to avoid circular dependence
    from .._core.policy import BasePolicy
    return isinstance(obj, BasePolicy)


def is_learner(obj):
    r"""

    Check whether an object is an off-policy learner, i.e. an instance of
    :class:`offtrace.OffPolicyEvaluation` or :class:`offtrace.OffPolicyControl`.

    Parameters
    ----------
    obj

        Object to check.

    Returns
    -------
    bool

        Whether ``obj`` is an off-policy learner.

    """
    # import at runtime to avoid circular dependence
    from .._core.base_off_policy import BaseOffPolicy
    return isinstance(obj, BaseOffPolicy)


def pretty_repr(o, d=0):
    r"""

    Generate a readable, indented :func:`repr` of nested containers. Arrays are summarized by
    their shape, dtype and min/median/max, so a value table doesn't flood the terminal.

    Parameters
    ----------
    o : object

        Any object, e.g. ``learner.update(...)`` metrics or a dict of value tables.

    d : int, optional

        The current nesting depth, which sets the indentation.

    Returns
    -------
    pretty_repr : str

        The formatted string.

    """
    if isinstance(o, onp.ndarray):
        stats = ""
        if o.size:
            stats = f", min={onp.min(o):.3g}, median={onp.median(o):.3g}, max={onp.max(o):.3g}"
        return f"array(shape={o.shape}, dtype={o.dtype}{stats})"

    indent = '\n' + '  ' * (d + 1)
    if hasattr(o, '_asdict'):
        fields = (f"{k}={pretty_repr(v, d + 1)}" for k, v in o._asdict().items())
        return f"{type(o).__name__}({indent}{indent.join(fields)})"
    if isinstance(o, (tuple, list)):
        items = ',' + indent
        body = items.join(pretty_repr(v, d + 1) for v in o)
        return f"({indent}{body})" if isinstance(o, tuple) else f"[{indent}{body}]"
    if isinstance(o, Mapping):
        items = ',' + indent
        body = items.join(f"{k!r}: {pretty_repr(v, d + 1)}" for k, v in o.items())
        return f"{{{indent}{body}}}"
    return repr(o)


def pretty_print(obj):
    r"""

    Print :func:`pretty_repr(obj) <offtrace.utils.pretty_repr>`.

    """
    print(pretty_repr(obj))
