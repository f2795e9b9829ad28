import os

import lz4.frame
import cloudpickle as pickle


class SerializationMixin:

    @classmethod
    def load(cls, filepath):
        r"""

        Load instance from a file.

        Parameters
        ----------
        filepath : str

            The filepath of the stored instance.

        """
        with lz4.frame.open(filepath, 'rb') as f:
            obj = pickle.loads(f.read())
        if not isinstance(obj, cls):
            raise TypeError(f"loaded obj must be an instance of {cls.__name__}, got: {type(obj)}")
        return obj

    def save(self, filepath):
        r"""

        Save instance to a file.

        The value table, the live traces, all hyperparameters and the referenced policies are
        stored together, so references between them survive the round trip.

        Parameters
        ----------
        filepath : str

            The filepath to store the instance.

        """
        os.makedirs(os.path.dirname(filepath) or '.', exist_ok=True)
        with lz4.frame.open(filepath, 'wb') as f:
            f.write(pickle.dumps(self))
