from copy import deepcopy, copy


class CopyMixin:
    def copy(self, deep=False):
        r"""

        Create a copy of the current instance.

        Both kinds of copy get their own value table and traces, so updating the copy never
        affects the original. A shallow copy shares the policies and the trace-discount strategy
        with the original, while a deep copy copies those too.

        Parameters
        ----------
        deep : bool, optional

            Whether the copy should be a deep copy.

        Returns
        -------
        copy

            A copy of the current instance.

        """
        return deepcopy(self) if deep else copy(self)
