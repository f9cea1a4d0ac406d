"""Declarative index configuration loaded from JSON-like mappings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntFlag
from typing import Any, Mapping

from knowhere.status import Status, StatusError

INT32_MAX = 2**31 - 1
FLOAT_MAX = 3.4028234663852886e38
DEFAULT_RANGE_FILTER = float("inf")

_KINDS = (str, float, int, list, bool)


class ParamType(IntFlag):
    """Operations a configuration entry applies to."""

    TRAIN = 0x1
    SEARCH = 0x2
    RANGE_SEARCH = 0x4
    FEDER = 0x8


@dataclass
class Entry:
    """Description of one configuration field."""

    name: str
    kind: type
    param_types: int = 0
    default_val: Any = None
    range: tuple[Any, Any] | None = None
    desc: str | None = None

    @property
    def has_default(self) -> bool:
        return self.default_val is not None


def _zero(kind: type) -> Any:
    return [] if kind is list else kind()


def _copy(value: Any) -> Any:
    return list(value) if isinstance(value, list) else value


def _accepts(kind: type, value: Any) -> bool:
    if kind is int:
        return isinstance(value, int) and not isinstance(value, bool)
    if kind is float:
        return isinstance(value, float)
    return isinstance(value, kind)


class EntryAccess:
    """Fluent builder that fills in an :class:`Entry` of a :class:`Config`."""

    def __init__(self, config: Config, entry: Entry) -> None:
        self._config = config
        self._entry = entry

    def set_default(self, value: Any) -> EntryAccess:
        kind = self._entry.kind
        if kind is float and isinstance(value, int) and not isinstance(value, bool):
            value = float(value)
        if not _accepts(kind, value):
            raise TypeError(f"default for {self._entry.name!r} must be {kind.__name__}")
        self._entry.default_val = _copy(value)
        setattr(self._config, self._entry.name, _copy(value))
        return self

    def set_range(self, low: Any, high: Any) -> EntryAccess:
        if self._entry.kind not in (int, float):
            raise TypeError(f"entry {self._entry.name!r} of kind {self._entry.kind.__name__} has no range")
        self._entry.range = (low, high)
        return self

    def description(self, text: str) -> EntryAccess:
        self._entry.desc = text
        return self

    def for_train(self) -> EntryAccess:
        self._entry.param_types |= ParamType.TRAIN
        return self

    def for_search(self) -> EntryAccess:
        self._entry.param_types |= ParamType.SEARCH
        return self

    def for_range_search(self) -> EntryAccess:
        self._entry.param_types |= ParamType.RANGE_SEARCH
        return self

    def for_feder(self) -> EntryAccess:
        self._entry.param_types |= ParamType.FEDER
        return self

    def for_all(self) -> EntryAccess:
        self._entry.param_types |= ParamType.TRAIN | ParamType.SEARCH | ParamType.RANGE_SEARCH
        return self


class Config:
    """A set of declared fields stored as attributes of the instance."""

    def __init__(self) -> None:
        self.entries: dict[str, Entry] = {}

    def declare(self, name: str, kind: type) -> EntryAccess:
        """Declare field ``name`` of ``kind`` (str, float, int, list or bool)."""
        if kind not in _KINDS:
            raise TypeError(f"unsupported config kind: {kind!r}")
        entry = Entry(name, kind)
        self.entries[name] = entry
        setattr(self, name, _zero(kind))
        return EntryAccess(self, entry)

    def save(self) -> dict[str, Any]:
        """Return the int, string and float fields as a dict."""
        return {
            name: getattr(self, name)
            for name, entry in self.entries.items()
            if entry.kind in (int, str, float)
        }

    def load(self, json: Mapping[str, Any], param_type: ParamType) -> None:
        """Fill the fields used by ``param_type`` from ``json``; raises StatusError."""
        for name, entry in self.entries.items():
            if not (param_type & entry.param_types):
                continue
            if name not in json:
                if not entry.has_default:
                    raise StatusError(Status.INVALID_PARAM_IN_JSON, name)
                setattr(self, name, _copy(entry.default_val))
                continue
            value = json[name]
            if not _accepts(entry.kind, value):
                raise StatusError(Status.TYPE_CONFLICT_IN_JSON, name)
            if entry.kind is list:
                if not all(_accepts(int, item) for item in value):
                    raise StatusError(Status.TYPE_CONFLICT_IN_JSON, name)
                getattr(self, name).extend(value)
                continue
            if entry.range is not None:
                limit = INT32_MAX if entry.kind is int else FLOAT_MAX
                if value > limit:
                    raise StatusError(Status.ARITHMETIC_OVERFLOW, name)
                low, high = entry.range
                if not low <= value <= high:
                    raise StatusError(Status.OUT_OF_RANGE_IN_JSON, name)
            setattr(self, name, value)


class BaseConfig(Config):
    """Fields shared by every index."""

    def __init__(self) -> None:
        super().__init__()
        self.declare("metric_type", str).set_default("L2").description("metric type").for_all()
        (
            self.declare("k", int)
            .set_default(10)
            .description("search for top k similar vector.")
            .set_range(1, INT32_MAX)
            .for_search()
        )
        (
            self.declare("radius", float)
            .set_default(0.0)
            .description("radius for range search")
            .for_range_search()
        )
        (
            self.declare("range_filter", float)
            .set_default(DEFAULT_RANGE_FILTER)
            .description("result filter for range search")
            .for_range_search()
        )
        (
            self.declare("trace_visit", bool)
            .set_default(False)
            .description("trace visit for feder")
            .for_search()
            .for_range_search()
        )