"""Interactive pick of one catalog label."""

from typing import Callable, List, Optional

from worldclock.data.models import Catalog, CityEntry

MAX_CHOICES = 20


def search_labels(catalog: Catalog, query: str) -> List[str]:
    """Labels containing every word of query, case-insensitively."""
    words = query.lower().split()
    return [label for label in catalog if all(w in label.lower() for w in words)]


def select_entry(
    catalog: Catalog,
    query: str = "",
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> Optional[CityEntry]:
    """
    Let the user pick one entry matching query.

    Returns:
        Chosen entry, or None when nothing matches or the user aborts
    """
    if not query:
        try:
            query = input_fn("City: ")
        except (EOFError, KeyboardInterrupt):
            return None

    matches = search_labels(catalog, query)
    if not matches:
        output_fn(f"No city matches '{query}'")
        return None

    shown = matches[:MAX_CHOICES]
    for number, label in enumerate(shown, start=1):
        output_fn(f"{number:3d}. {label}")
    if len(matches) > len(shown):
        output_fn(f"... {len(matches) - len(shown)} more, refine the search")

    try:
        answer = input_fn("Number (empty to cancel): ").strip()
    except (EOFError, KeyboardInterrupt):
        return None

    if not answer.isdigit() or not 1 <= int(answer) <= len(shown):
        return None
    return catalog[shown[int(answer) - 1]]
