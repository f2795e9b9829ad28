import numpy as onp


class RandomStateMixin:
    @property
    def random_seed(self):
        return self._random_seed

    @random_seed.setter
    def random_seed(self, new_random_seed):
        self._random_seed = new_random_seed
        self._rnd = onp.random.RandomState(new_random_seed)

    @property
    def rnd(self):
        return self._rnd
