"""Module with a parent class of all data structures."""

from dataclasses import dataclass

import numpy as np

__all__ = ["DataBase"]


@dataclass(eq=False)
class DataBase:
    """Base class of all data structures.

    Defines basic methods shared by all data structures.
    """

    def __eq__(self, other):
        """Checks that all attributes of two class instances are the same.

        This overloads the default dataclass `__eq__` method to include an
        appropriate check for vector (numpy) attributes. Two NaN scalars are
        considered equal, so that unset quantities compare as identical.

        Parameters
        ----------
        other : obj
            Other instance of the same object class

        Returns
        -------
        bool
            `True` if all attributes of both objects are identical
        """
        # Check that the two objects belong to the same class
        if self.__class__ != other.__class__:
            return False

        # Check that all base attributes are identical
        for k, v in self.__dict__.items():
            v_other = getattr(other, k)
            if np.isscalar(v) and isinstance(v, (float, np.floating)):
                if not (v == v_other or (np.isnan(v) and np.isnan(v_other))):
                    return False

            elif isinstance(v, np.ndarray):
                if v.shape != np.shape(v_other) or (v_other != v).any():
                    return False

            elif v != v_other:
                return False

        return True
