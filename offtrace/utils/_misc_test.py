import os
import tempfile
import logging

import numpy as onp

from .._base.test_case import DiscreteEnv
from .._core.off_policy_control import OffPolicyControl
from .._core.random_policy import RandomPolicy
from .._core.value_based_policy import EpsilonGreedy
from ._misc import (
    docstring, dump, dumps, enable_logging, is_learner, is_policy, load, loads, pretty_repr)


def test_dump_load():
    with tempfile.TemporaryDirectory() as d:
        a = [13]
        b = {'a': a}

        # references preserved
        dump((a, b), os.path.join(d, 'ab.pkl.lz4'))
        a_new, b_new = load(os.path.join(d, 'ab.pkl.lz4'))
        b_new['a'].append(7)
        assert b_new['a'] == [13, 7]
        assert a_new == [13, 7]

        # references not preserved
        dump(a, os.path.join(d, 'a.pkl.lz4'))
        dump(b, os.path.join(d, 'b.pkl.lz4'))
        a_new = load(os.path.join(d, 'a.pkl.lz4'))
        b_new = load(os.path.join(d, 'b.pkl.lz4'))
        b_new['a'].append(7)
        assert b_new['a'] == [13, 7]
        assert a_new == [13]


def test_dumps_loads():
    a = [13]
    b = {'a': a}

    # references preserved
    s = dumps((a, b))
    a_new, b_new = loads(s)
    b_new['a'].append(7)
    assert b_new['a'] == [13, 7]
    assert a_new == [13, 7]

    # references not preserved
    s_a = dumps(a)
    s_b = dumps(b)
    a_new = loads(s_a)
    b_new = loads(s_b)
    b_new['a'].append(7)
    assert b_new['a'] == [13, 7]
    assert a_new == [13]


def test_dump_load_learner_and_policy():
    pi_behavior = RandomPolicy(DiscreteEnv(13))
    learner = OffPolicyControl(pi_behavior, learning_rate=1.0)
    pi = EpsilonGreedy(learner, epsilon=0.)
    learner.update(0, 2, 1, 1.0)

    with tempfile.TemporaryDirectory() as d:
        dump((learner, pi), os.path.join(d, 'checkpoint.pkl.lz4'))
        learner_new, pi_new = load(os.path.join(d, 'checkpoint.pkl.lz4'))

    assert pi_new.q_source is learner_new
    onp.testing.assert_array_almost_equal(learner_new.q, learner.q)
    assert learner_new.traces == learner.traces

    learner_new.update(0, 1, 1, 5.0)
    assert pi_new.mode(0) == 1
    assert pi.mode(0) == 2


def test_is_policy_is_learner():
    pi = RandomPolicy(DiscreteEnv(13))
    learner = OffPolicyControl(pi)
    assert is_policy(pi)
    assert is_policy(EpsilonGreedy(learner))
    assert not is_policy(learner)
    assert not is_policy(lambda s: 0)
    assert is_learner(learner)
    assert not is_learner(pi)
    assert not is_learner(onp.zeros((5, 3)))


def test_docstring():
    def f(x):
        """Some docstring"""
        return x * x

    @docstring(f)
    def g(x):
        return 13 - x

    assert g.__doc__ == "Some docstring"
    assert g(3) == 10


def test_enable_logging(tmp_path):
    filepath = str(tmp_path / 'logs' / 'train.log')
    enable_logging('offtrace-test', output_filepath=filepath)
    root = logging.getLogger('')
    file_handler = root.handlers[-1]
    try:
        logging.getLogger('offtrace-test').warning("hello from the test")
        file_handler.flush()
        with open(filepath) as f:
            assert "hello from the test" in f.read()
    finally:
        root.removeHandler(file_handler)
        file_handler.close()


def test_pretty_repr():
    assert pretty_repr(onp.array([1., 2., 3.])) == (
        "array(shape=(3,), dtype=float64, min=1, median=2, max=3)")
    assert pretty_repr(onp.array([])) == "array(shape=(0,), dtype=float64)"
    assert pretty_repr({'a': 1}) == "{\n  'a': 1}"
    assert pretty_repr([1, 'b']) == "[\n  1,\n  'b']"
