# coding=utf-8
"""WBGT parameter base object."""


class WBGTParameter:
    """WBGT model parameter base class."""
    _model = None
    __slots__ = ()

    @property
    def model(self):
        """Return the name of the model to which the parameters belong."""
        return self._model

    def duplicate(self):
        """Get a copy of this object."""
        return self.__copy__()
