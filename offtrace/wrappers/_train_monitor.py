import os
import time
from collections.abc import Mapping

import lz4.frame
import cloudpickle as pickle
from gymnasium import Wrapper
from tensorboardX import SummaryWriter

from .._base.mixins import LoggerMixin
from ..utils import enable_logging


__all__ = (
    'TrainMonitor',
)


class TrainMonitor(Wrapper, LoggerMixin):
    r"""

    Environment wrapper that keeps track of the training progress of an off-policy learner.

    The wrapper counts steps and episodes, accumulates the episode return and averages the metrics
    that a learner's ``update`` returns over each episode. A single line is logged at the end of
    every episode:

    .. code:: python

        env = offtrace.wrappers.TrainMonitor(gymnasium.make('FrozenLakeNonSlippery-v0'))
        learner = offtrace.OffPolicyControl(offtrace.RandomPolicy(env))

        s, info = env.reset()
        a = learner.pi_behavior(s)
        s_next, r, terminated, truncated, info = env.step(a)
        env.record_metrics(learner.update(s, a, s_next, r, done=terminated))

    Parameters
    ----------
    env : gymnasium.Env

        The environment to monitor.

    tensorboard_dir : str, optional

        If provided, the episode statistics and the episode-averaged learner metrics are also
        written to tensorboard, see ``tensorboard --logdir {tensorboard_dir}``.

    log_all_metrics : bool, optional

        By default only the trace diagnostics (``*/td_error``, ``*/trace_discount`` and
        ``*/num_traces``) make it into the log line. Set this to ``True`` to log every recorded
        metric.

    smoothing : positive int, optional

        The number of episodes over which :attr:`avg_G` is (approximately) averaged.

    \*\*logger_kwargs

        Keyword arguments to pass on to :func:`offtrace.utils.enable_logging`.

    Attributes
    ----------
    T : int

        Global step counter. Resets count as a step too. Only :func:`reset_global` sets it back
        to zero.

    ep : int

        Global episode counter.

    t : int

        Step counter within the current episode.

    G : float

        The return accumulated so far in the current episode.

    avg_G : float

        The smoothed return of the past episodes.

    """
    LOGGED_METRICS = ('/td_error', '/trace_discount', '/num_traces')
    _COUNTERS = ('T', 'ep', 't', 'G', 'avg_G', '_num_returns', '_metrics', '_periods')

    def __init__(
            self, env,
            tensorboard_dir=None,
            log_all_metrics=False,
            smoothing=10,
            **logger_kwargs):

        super().__init__(env)
        self.log_all_metrics = log_all_metrics
        self.smoothing = int(smoothing)
        self.tensorboard = None if tensorboard_dir is None else SummaryWriter(tensorboard_dir)
        enable_logging(**logger_kwargs)
        self.reset_global()

    def reset_global(self):
        r""" Reset all counters, including the global ones. """
        self.T = 0
        self.ep = 0
        self.t = 0
        self.G = 0.0
        self.avg_G = 0.0
        self._num_returns = 0
        self._metrics = {}
        self._periods = {}
        self._start = time.time()

    def reset(self, **kwargs):
        if self.ep:
            self._end_of_episode()
        self.T += 1
        self.ep += 1
        self.t = 0
        self.G = 0.0
        self._metrics = {}
        self._start = time.time()
        return self.env.reset(**kwargs)

    def step(self, a):
        s_next, r, terminated, truncated, info = self.env.step(a)
        info = {} if info is None else info
        info['monitor'] = {'T': self.T, 'ep': self.ep}
        self.T += 1
        self.t += 1
        self.G += r
        if terminated or truncated:
            self._num_returns = min(self._num_returns + 1, self.smoothing)
            self.avg_G += (self.G - self.avg_G) / self._num_returns
        return s_next, r, terminated, truncated, info

    @property
    def dt_ms(self):
        r""" The average wall time per step in the current episode, in milliseconds. """
        return 1000 * (time.time() - self._start) / self.t if self.t else float('nan')

    def record_metrics(self, metrics):
        r"""

        Record the metrics of a single update, e.g. the output of a learner's ``update`` method.

        Parameters
        ----------
        metrics : dict

            A dict of type ``{name <str>: value <float>}``.

        """
        if not isinstance(metrics, Mapping):
            raise TypeError(f"metrics must be a Mapping, got: {type(metrics)}")
        for name, value in metrics.items():
            total, count = self._metrics.get(name, (0.0, 0))
            self._metrics[name] = total + float(value), count + 1

    def get_metrics(self):
        r"""

        The metrics recorded so far in the current episode, averaged over the number of updates.

        Returns
        -------
        metrics : dict

            A dict of type ``{name <str>: value <float>}``.

        """
        return {name: total / count for name, (total, count) in self._metrics.items()}

    def period(self, name, T_period=None, ep_period=None):
        r"""

        Check whether a periodic event is due, e.g. raising the learner's ``exploration`` every 50
        episodes. Each ``name`` keeps its own schedule, and an event is due at most once per
        multiple of the period.

        Parameters
        ----------
        name : str

            The name of the periodic event.

        T_period : positive int, optional

            The period in terms of global steps.

        ep_period : positive int, optional

            The period in terms of episodes.

        Returns
        -------
        due : bool

            Whether the event is due.

        """
        for counter, period in (('T', T_period), ('ep', ep_period)):
            if period is None:
                continue
            if int(period) <= 0:
                raise ValueError(f"{counter}_period must be a positive int, got: {period}")
            n = getattr(self, counter) // int(period)
            if n > self._periods.get((name, counter), 0):
                self._periods[(name, counter)] = n
                return True
        return False

    def _end_of_episode(self):
        metrics = self.get_metrics()
        logged = {
            k: v for k, v in metrics.items()
            if self.log_all_metrics or str(k).endswith(self.LOGGED_METRICS)}
        self.logger.info(',\t'.join((
            f'ep: {self.ep:d}',
            f'T: {self.T:,d}',
            f'G: {self.G:.3g}',
            f'avg_G: {self.avg_G:.3g}',
            f't: {self.t:d}',
            f'dt: {self.dt_ms:.3f}ms',
            *(f'{k}: {v:.3g}' for k, v in logged.items()))))

        if self.tensorboard is not None:
            scalars = {'episode/return': self.G, 'episode/avg_return': self.avg_G,
                       'episode/steps': self.t, **metrics}
            for name, value in scalars.items():
                self.tensorboard.add_scalar(str(name), float(value), global_step=self.T)
            self.tensorboard.flush()

    def get_counters(self):
        r"""

        Get the current state of all counters, e.g. to resume training from a checkpoint.

        Returns
        -------
        counters : dict

            The counters by name.

        """
        return {k: getattr(self, k) for k in self._COUNTERS}

    def set_counters(self, counters):
        r"""

        Restore the counters that were obtained from :func:`get_counters`.

        Parameters
        ----------
        counters : dict

            The counters by name.

        """
        if not isinstance(counters, Mapping) or set(counters) != set(self._COUNTERS):
            raise TypeError(f"invalid counters dict: {counters}")
        for k, v in counters.items():
            setattr(self, k, v)

    def save_counters(self, filepath):
        r"""

        Write the counters to an lz4-compressed pickle file.

        Parameters
        ----------
        filepath : str

            The checkpoint file path.

        """
        os.makedirs(os.path.dirname(filepath) or '.', exist_ok=True)
        with lz4.frame.open(filepath, 'wb') as f:
            f.write(pickle.dumps(self.get_counters()))

    def load_counters(self, filepath):
        r"""

        Restore the counters from a file that was created by :func:`save_counters`.

        Parameters
        ----------
        filepath : str

            The checkpoint file path.

        """
        with lz4.frame.open(filepath, 'rb') as f:
            self.set_counters(pickle.loads(f.read()))
