import re

from .. import log


_whitespace = re.compile(r"\s+")


class DiffOptions:
    """Set of comparison options to pass around while diffing.

    ignore_key_order is accepted for compatibility only: objects are
    always compared by key, never by position.
    """

    def __init__(self, *, ignore_key_order=True, ignore_whitespace=False,
                 ignore_case=False, ignore_type=False, ignore_keys=None):
        if not ignore_key_order:
            log.debug("ignore_key_order=False has no effect, "
                      "object keys are always compared by name")
        self.ignore_key_order = True
        self.ignore_whitespace = bool(ignore_whitespace)
        self.ignore_case = bool(ignore_case)
        self.ignore_type = bool(ignore_type)
        if isinstance(ignore_keys, str):
            ignore_keys = [ignore_keys]
        self.ignore_keys = frozenset(ignore_keys or ())

    def normalize_string(self, s):
        "Apply whitespace and case folding to a string before comparison."
        if self.ignore_whitespace:
            s = _whitespace.sub(" ", s.strip())
        if self.ignore_case:
            s = s.casefold()
        return s

    def is_ignored_key(self, key):
        return key in self.ignore_keys

    def __eq__(self, other):
        if not isinstance(other, DiffOptions):
            return NotImplemented
        return vars(self) == vars(other)

    def __repr__(self):
        return "DiffOptions(%s)" % ", ".join(
            "%s=%r" % (k, v) for k, v in sorted(vars(self).items()))

    def __copy__(self):
        return DiffOptions(
            ignore_whitespace=self.ignore_whitespace,
            ignore_case=self.ignore_case,
            ignore_type=self.ignore_type,
            ignore_keys=self.ignore_keys,
        )
