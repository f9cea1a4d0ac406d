"""Thread-safe container for index inputs and search results."""

from __future__ import annotations

import threading
from typing import Any

from knowhere.index_param import Meta

_DEFAULTS: dict[str, Any] = {
    Meta.ROWS.value: 0,
    Meta.DIM.value: 0,
    Meta.JSON_INFO.value: "",
    Meta.JSON_ID_SET.value: "",
}


def _field(key: Meta) -> property:
    name = key.value

    def getter(self: DataSet) -> Any:
        with self._lock:
            return self._data.get(name, _DEFAULTS.get(name))

    def setter(self: DataSet, value: Any) -> None:
        with self._lock:
            self._data[name] = value

    return property(getter, setter)


class DataSet:
    """Keyed storage for tensors, ids, distances and metadata."""

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._data: dict[str, Any] = {}
        self._is_owner = True

    distance = _field(Meta.DISTANCE)
    lims = _field(Meta.LIMS)
    ids = _field(Meta.IDS)
    tensor = _field(Meta.TENSOR)
    rows = _field(Meta.ROWS)
    dim = _field(Meta.DIM)
    json_info = _field(Meta.JSON_INFO)
    json_id_set = _field(Meta.JSON_ID_SET)

    @property
    def is_owner(self) -> bool:
        with self._lock:
            return self._is_owner

    @is_owner.setter
    def is_owner(self, value: bool) -> None:
        with self._lock:
            self._is_owner = bool(value)

    def set(self, key: str, value: Any) -> None:
        """Store an arbitrary value under ``key``."""
        with self._lock:
            self._data[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value under ``key``, or ``default`` if absent."""
        with self._lock:
            return self._data.get(key, default)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data


def gen_dataset(rows: int, dim: int, tensor: Any) -> DataSet:
    """Wrap input vectors without taking ownership of them."""
    ds = DataSet()
    ds.rows = rows
    ds.dim = dim
    ds.tensor = tensor
    ds.is_owner = False
    return ds


def gen_result_tensor(tensor: Any) -> DataSet:
    ds = DataSet()
    ds.tensor = tensor
    ds.is_owner = True
    return ds


def gen_result_topk(nq: int, topk: int, ids: Any, distance: Any) -> DataSet:
    """Result of a top-k search: ``nq`` rows of ``topk`` ids and distances."""
    ds = DataSet()
    ds.rows = nq
    ds.dim = topk
    ds.ids = ids
    ds.distance = distance
    ds.is_owner = True
    return ds


def gen_result_range(nq: int, ids: Any, distance: Any, lims: Any) -> DataSet:
    """Result of a range search, with per-query offsets in ``lims``."""
    ds = DataSet()
    ds.rows = nq
    ds.ids = ids
    ds.distance = distance
    ds.lims = lims
    ds.is_owner = True
    return ds


def gen_result_json(json_info: str, json_id_set: str) -> DataSet:
    ds = DataSet()
    ds.json_info = json_info
    ds.json_id_set = json_id_set
    ds.is_owner = True
    return ds