# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from ..diff_format import Missing
from ..log import DiffFormatError
from ..paths import as_path
from .strategies import MergeStrategy, validate_strategy


class MergeDecision(dict):
    """For internal usage in jsondime library.

    Minimal class providing attribute access to merge decision keys:
    path, strategy and an optional explicit value.
    """

    def __getattr__(self, name):
        if name.startswith("__") and name.endswith("__"):
            return self.__getattribute__(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def __setattr__(self, name, value):
        self[name] = value

    def has_value(self):
        return "value" in self


def make_decision(path, strategy, value=Missing):
    """Create a validated decision for one path.

    The value is only stored when given, so None stays a valid
    explicit value (JSON null).
    """
    try:
        validate_strategy(strategy)
    except ValueError as e:
        raise DiffFormatError(str(e))
    try:
        path = as_path(path)
    except DiffFormatError:
        raise
    except (TypeError, ValueError) as e:
        raise DiffFormatError("Invalid merge decision path {!r}: {}".format(path, e))
    d = MergeDecision(path=path, strategy=strategy)
    if value is not Missing:
        d["value"] = value
    return d


class MergeDecisionBuilder(object):
    """A helper class for building the per-path decisions of a manual merge.
    """
    def __init__(self):
        self.decisions = {}

    def __bool__(self):
        return bool(self.decisions)

    def __len__(self):
        return len(self.decisions)

    def __iter__(self):
        return iter(self.decisions.values())

    def add_decision(self, path, strategy, value=Missing):
        """Add a decision, replacing any earlier decision for the same path."""
        d = make_decision(path, strategy, value)
        self.decisions[d.path] = d
        return d

    def use_left(self, path):
        return self.add_decision(path, MergeStrategy.USE_LEFT)

    def use_right(self, path):
        return self.add_decision(path, MergeStrategy.USE_RIGHT)

    def custom(self, path, value):
        "Decide an explicit value for path."
        return self.add_decision(path, MergeStrategy.MANUAL, value)

    def extend(self, decisions):
        for d in as_decision_map(decisions).values():
            self.decisions[d.path] = d

    def validated(self):
        "Return the decisions as a map from Path to decision."
        return dict(self.decisions)


def as_decision_map(decisions):
    """Normalize decisions to a dict mapping Path to MergeDecision.

    Accepts a builder, a mapping keyed by Path or canonical path
    string, or a sequence of decision dicts (as loaded from JSON).
    """
    if decisions is None:
        return {}
    if isinstance(decisions, MergeDecisionBuilder):
        return decisions.validated()
    result = {}
    if isinstance(decisions, dict):
        items = decisions.items()
    elif isinstance(decisions, (list, tuple)):
        items = ((d.get("path") if isinstance(d, dict) else None, d)
                 for d in decisions)
    else:
        raise DiffFormatError(
            "Merge decisions must be a list or an object, got {!r}.".format(decisions))
    for key, d in items:
        if not isinstance(d, dict):
            raise DiffFormatError("Merge decision '{}' is not an object.".format(d))
        if key is None:
            raise DiffFormatError("Merge decision '{}' has no path.".format(d))
        d = make_decision(key, d.get("strategy"), d.get("value", Missing))
        result[d.path] = d
    return result
