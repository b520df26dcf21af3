"""
Loan reference data store.

Read-only lookup of product copy keyed by LoanCategory. The table is frozen
at construction, so one store can be shared by concurrent requests.
"""

from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Union

from loan_mcp.errors import NotFoundError
from loan_mcp.loan_content import LOAN_INFO


class LoanCategory(str, Enum):
    OVERVIEW = "overview"
    ELIGIBILITY = "eligibility"
    FEATURES = "features"
    INTEREST_RATES = "interest_rates"
    DOCUMENTS = "documents"
    VARIANTS = "variants"
    ALL = "all"

    @classmethod
    def concrete(cls) -> List["LoanCategory"]:
        """Every category backed by a stored entry (everything but ALL)."""
        return [category for category in cls if category is not cls.ALL]

    @classmethod
    def parse(cls, value: Union[str, "LoanCategory"]) -> "LoanCategory":
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise NotFoundError(value, [category.value for category in cls]) from None


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value


class LoanReferenceStore:
    """
    Immutable table of loan info entries.

    Lookups return fresh plain dict/list copies so callers cannot reach the
    shared table.
    """

    def __init__(self, entries: Optional[Mapping[str, Mapping[str, Any]]] = None):
        entries = LOAN_INFO if entries is None else entries
        table = {}
        for category in LoanCategory.concrete():
            if category.value not in entries:
                raise ValueError(f"missing loan info entry for category {category.value!r}")
            table[category] = _freeze(entries[category.value])
        unknown = set(entries) - {category.value for category in LoanCategory.concrete()}
        if unknown:
            raise ValueError(f"unexpected loan info categories: {sorted(unknown)}")
        self._table = MappingProxyType(table)

    def categories(self) -> List[str]:
        return [category.value for category in LoanCategory.concrete()]

    def entry(self, category: Union[str, LoanCategory]) -> Dict[str, Any]:
        """Return the entry for a single concrete category."""
        parsed = LoanCategory.parse(category)
        if parsed is LoanCategory.ALL:
            raise NotFoundError(parsed.value, self.categories())
        return _thaw(self._table[parsed])

    def composite(self) -> Dict[str, Dict[str, Any]]:
        """Every entry keyed by category name, derived from the table."""
        return {category.value: _thaw(self._table[category]) for category in LoanCategory.concrete()}

    def get(self, category: Union[str, LoanCategory]) -> Dict[str, Any]:
        """
        Look up a category; "all" yields the composite view.

        Raises NotFoundError for anything outside LoanCategory.
        """
        parsed = LoanCategory.parse(category)
        if parsed is LoanCategory.ALL:
            return self.composite()
        return self.entry(parsed)
