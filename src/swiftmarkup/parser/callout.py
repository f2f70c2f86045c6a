"""The fixed vocabulary of Swift Markup callouts."""

from __future__ import annotations

from enum import Enum


class CalloutDelimiter(Enum):
    """Canonical callout labels. Each value is the label's display name."""

    ATTENTION = "Attention"
    AUTHOR = "Author"
    AUTHORS = "Authors"
    BUG = "Bug"
    COMPLEXITY = "Complexity"
    COPYRIGHT = "Copyright"
    DATE = "Date"
    EXPERIMENT = "Experiment"
    IMPORTANT = "Important"
    INVARIANT = "Invariant"
    NOTE = "Note"
    PRECONDITION = "Precondition"
    POSTCONDITION = "Postcondition"
    REMARK = "Remark"
    REQUIRES = "Requires"
    SEE_ALSO = "See Also"
    SINCE = "Since"
    TODO = "To Do"
    VERSION = "Version"
    WARNING = "Warning"

    @classmethod
    def lookup(cls, label: str) -> CalloutDelimiter | None:
        return lookup(label)


def _normalize(label: str) -> str:
    return "".join(ch for ch in label if not ch.isspace()).lower()


_BY_NORMALIZED_NAME = {_normalize(delimiter.value): delimiter for delimiter in CalloutDelimiter}


def lookup(label: str) -> CalloutDelimiter | None:
    """Return the callout whose name matches *label*, ignoring case and whitespace.

    ``"seealso"``, ``"See Also"`` and ``" SEE  ALSO "`` all resolve to
    :attr:`CalloutDelimiter.SEE_ALSO`. Unknown labels return ``None``.
    """
    return _BY_NORMALIZED_NAME.get(_normalize(label))
