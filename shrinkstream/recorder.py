"""Recording of drawn words and the group structure over them.

A Recorder lives for exactly one generation attempt. When persisting, it
keeps every drawn word plus a list of groups (spans over the words) in the
order they were opened. Shrinking works by pruning discarded groups out of
that recording and replaying what is left.
"""

import logging
from dataclasses import dataclass, replace
from typing import Iterable, Iterator

from .errors import assert_invariant

logger = logging.getLogger(__name__)

OPEN = -1


@dataclass
class Group:
    """A labelled span [begin, end) of drawn words."""
    begin: int
    end: int = OPEN  # OPEN until the group is closed
    label: str = ""
    removable: bool = False
    discard: bool = False

    @property
    def closed(self) -> bool:
        return self.end != OPEN


class Recorder:
    """Tracks drawn words and groups for a single attempt.

    Without persistence only a word counter is kept, which is still enough
    to catch groups that drew nothing.
    """

    def __init__(self, persist: bool = False):
        self.persist = persist
        self.data: list[int] = []
        self.groups: list[Group] = []
        self.data_len = 0

    def record(self, word: int) -> None:
        if self.persist:
            self.data.append(word)
        self.data_len += 1

    def begin_group(self, label: str, removable: bool) -> int:
        """Open a group.

        Args:
            label: Diagnostic name
            removable: Whether a shrink pass may try dropping this group

        Returns:
            Handle to pass to end_group. Without persistence this is just
            the current word count.
        """
        if not self.persist:
            return self.data_len

        self.groups.append(Group(
            begin=len(self.data),
            label=label,
            removable=removable,
        ))
        return len(self.groups) - 1

    def end_group(self, handle: int, discard: bool) -> None:
        """Close the group opened under handle.

        Args:
            handle: Value returned by begin_group
            discard: Mark the group's words as safe to delete
        """
        if not self.persist:
            assert_invariant(0 <= handle <= self.data_len, "unknown group handle %r", handle)
            assert_invariant(self.data_len != handle, "group did not use any data from bitstream")
            return

        assert_invariant(0 <= handle < len(self.groups), "unknown group handle %r", handle)
        group = self.groups[handle]
        assert_invariant(not group.closed, "group %r (%s) closed twice", handle, group.label)
        assert_invariant(len(self.data) != group.begin, "group did not use any data from bitstream")

        group.end = len(self.data)
        group.discard = discard

    def prune(self) -> None:
        """Delete every discarded group, its words and the groups nested in it."""
        assert_invariant(self.persist, "cannot prune a recording without persistence")
        for group in self.groups:
            assert_invariant(group.closed, "cannot prune open group %s", group.label)

        i = 0
        while i < len(self.groups):
            if self.groups[i].discard:
                self._remove_group(i)  # O(n^2)
            else:
                i += 1

        for group in self.groups:
            assert_invariant(not group.discard, "discarded group %s survived pruning", group.label)
            assert_invariant(group.begin != group.end, "group %s is empty after pruning", group.label)

    def _remove_group(self, i: int) -> None:
        g = self.groups[i]
        assert_invariant(g.closed, "cannot remove open group %s", g.label)
        assert_invariant(
            0 <= g.begin < g.end <= len(self.data),
            "group %s has inconsistent span [%d, %d)", g.label, g.begin, g.end,
        )

        # Groups opened after g that end no later than g are nested in it
        j = i + 1
        while j < len(self.groups) and self.groups[j].end <= g.end:
            j += 1

        del self.data[g.begin:g.end]
        del self.groups[i:j]

        n = g.end - g.begin
        for other in self.groups:
            if other.begin >= g.end:
                other.begin -= n
            if other.end >= g.end:
                other.end -= n

        logger.debug(
            "Removed group %r [%d, %d) with %d nested, %d words left",
            g.label, g.begin, g.end, j - i - 1, len(self.data),
        )

    def snapshot(self) -> "Recording":
        """Copy the persisted words and groups into a Recording."""
        assert_invariant(self.persist, "cannot snapshot a recording without persistence")
        for group in self.groups:
            assert_invariant(group.closed, "group %s is still open", group.label)
        return Recording(
            data=tuple(self.data),
            groups=tuple(replace(g) for g in self.groups),
        )


@dataclass(frozen=True)
class Recording:
    """Frozen result of one persisting attempt.

    The shrink loop keeps these around and derives candidate replay buffers
    from them with without().
    """
    data: tuple[int, ...] = ()
    groups: tuple[Group, ...] = ()

    def removable_indices(self) -> list[int]:
        """Indices of groups a shrink pass is allowed to try dropping."""
        return [i for i, g in enumerate(self.groups) if g.removable]

    def without(self, indices: Iterable[int]) -> "Recording":
        """Return a new recording with the given groups pruned out.

        Args:
            indices: Positions in self.groups to discard

        Returns:
            Pruned Recording; this one is left untouched
        """
        rec = Recorder(persist=True)
        rec.data = list(self.data)
        rec.data_len = len(rec.data)
        rec.groups = [replace(g, discard=False) for g in self.groups]
        for i in indices:
            assert_invariant(0 <= i < len(rec.groups), "unknown group index %r", i)
            rec.groups[i].discard = True
        rec.prune()
        return rec.snapshot()

    def candidates(self) -> Iterator["Recording"]:
        """Yield one pruned recording per removable group, in open order."""
        for i in self.removable_indices():
            yield self.without([i])
