"""Per-keyword occurrence list kept in non-increasing frequency order."""

from collections.abc import Iterator

from kwsearch.data_models.occurrence import Occurrence


def insert_last_occurrence(occs: list[Occurrence]) -> list[int] | None:
    """Move the last occurrence of ``occs`` into its sorted slot, in place.

    ``occs[:-1]`` must already be in descending order of frequency. The slot is
    found by binary search over that prefix; on a frequency tie the new
    occurrence takes the tied entry's index, ahead of it.

    Returns the midpoints probed by the search, in order, or None when the
    list holds a single occurrence and nothing needs to move.
    """
    if not occs:
        raise ValueError("Cannot insert into an empty occurrence list")
    if len(occs) == 1:
        return None

    probes: list[int] = []
    new = occs[-1]
    low, high = 0, len(occs) - 2
    mid = 0
    while low <= high:
        mid = (low + high) // 2
        probes.append(mid)
        if occs[mid].frequency == new.frequency:
            break
        if new.frequency > occs[mid].frequency:
            high = mid - 1
        else:
            low = mid + 1
            if high <= mid:
                mid += 1

    occs.pop()
    occs.insert(mid, new)
    return probes


class OccurrenceList:
    """Read-only view over a sorted occurrence list; ``add`` is the only mutator."""

    def __init__(self) -> None:
        self._occs: list[Occurrence] = []

    def add(self, occurrence: Occurrence) -> list[int] | None:
        self._occs.append(occurrence)
        return insert_last_occurrence(self._occs)

    def head(self, k: int) -> tuple[Occurrence, ...]:
        return tuple(self._occs[:k])

    def documents(self) -> list[str]:
        return [occ.document for occ in self._occs]

    def __iter__(self) -> Iterator[Occurrence]:
        return iter(tuple(self._occs))

    def __len__(self) -> int:
        return len(self._occs)

    def __getitem__(self, idx: int) -> Occurrence:
        return self._occs[idx]

    def __repr__(self) -> str:
        return "[" + ", ".join(str(occ) for occ in self._occs) + "]"
