"""In-memory filtering for list screens.

Lists are fetched whole and narrowed in process: a case-insensitive
substring search over a few text fields plus optional categorical filters
where ``"all"`` (or nothing) means no filter.
"""
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Union

from shared.core.schemas import ListState

FieldGetter = Union[str, Callable[[Any], Optional[str]]]


def _read(item: Any, getter: FieldGetter) -> Optional[str]:
    if callable(getter):
        return getter(item)
    if isinstance(item, dict):
        return item.get(getter)
    return getattr(item, getter, None)


def matches_search(item: Any, search: Optional[str], fields: Sequence[FieldGetter]) -> bool:
    if not search:
        return True
    needle = search.lower()
    for getter in fields:
        value = _read(item, getter)
        if value is not None and needle in str(value).lower():
            return True
    return False


def matches_choice(value: Optional[str], choice: Optional[str]) -> bool:
    if not choice or choice.lower() == "all":
        return True
    return (value or "").lower() == choice.lower()


def filter_rows(
    items: Iterable[Any],
    search: Optional[str] = None,
    fields: Sequence[FieldGetter] = (),
    choices: Optional[Dict[FieldGetter, Optional[str]]] = None,
) -> List[Any]:
    result = []
    for item in items:
        if not matches_search(item, search, fields):
            continue
        if choices and not all(
            matches_choice(_read(item, getter), choice) for getter, choice in choices.items()
        ):
            continue
        result.append(item)
    return result


def list_state(total: int, matched: int) -> ListState:
    if total == 0:
        return ListState.empty
    if matched == 0:
        return ListState.no_match
    return ListState.ready
