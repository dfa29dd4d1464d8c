from collections.abc import MutableMapping
from typing import Any
from typing import Iterator


class AttrDict(MutableMapping):
    """Dict-like object that allows for item attribute access

    Example::

       data = AttrDict()
       data['key'] = 'value'
       print(data['key'])

       data.key = 'new-value'
       print(data.key)

       # Convert an existing `dict`
       data = AttrDict(dict(key='value'))
       print(data.key)
    """

    def __init__(self, *args, **kwargs):
        # type: (Any, Any) -> None
        object.__setattr__(self, "_data", dict(*args, **kwargs))

    def __getattr__(self, name):
        # type: (str) -> Any
        # DEV: `_data` is missing on instances created without `__init__` (copy, pickle)
        data = self.__dict__.get("_data")
        if data is None:
            raise AttributeError(name)
        try:
            return data[name]
        except KeyError:
            raise AttributeError(f"{type(self).__name__} object has no attribute {name}")

    def __setattr__(self, name, value):
        # type: (str, Any) -> None
        self[name] = value

    def __getitem__(self, name):
        # type: (str) -> Any
        return self._data[name]

    def __setitem__(self, name, value):
        # type: (str, Any) -> None
        self._data[name] = value

    def __delitem__(self, name):
        # type: (str) -> None
        del self._data[name]

    def __iter__(self):
        # type: () -> Iterator[str]
        return iter(self._data)

    def __len__(self):
        return len(self._data)
