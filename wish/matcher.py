"""Sequence matching in the gestalt style: matching blocks, opcodes and ratios."""

from collections import Counter, defaultdict
from typing import Callable, Dict, List, NamedTuple, Optional, Sequence, Set


class Match(NamedTuple):
    """A matching block: ``a[a:a+size] == b[b:b+size]``."""

    a: int
    b: int
    size: int


class OpCode(NamedTuple):
    """One edit step turning ``a[i1:i2]`` into ``b[j1:j2]``.

    The tag is ``'r'`` (replace), ``'d'`` (delete), ``'i'`` (insert) or
    ``'e'`` (equal).
    """

    tag: str
    i1: int
    i2: int
    j1: int
    j2: int


def _calculate_ratio(matches: int, length: int) -> float:
    if length > 0:
        return 2.0 * matches / length
    return 1.0


class SequenceMatcher:
    """Compare two sequences of strings and describe how they differ.

    The longest contiguous junk-free matching block is found first, and the
    same is done recursively on the pieces to its left and right.
    """

    def __init__(
        self,
        a: Sequence[str] = (),
        b: Sequence[str] = (),
        is_junk: Optional[Callable[[str], bool]] = None,
        auto_junk: bool = True,
    ) -> None:
        self.is_junk = is_junk
        self.auto_junk = auto_junk
        self.a: List[str] = []
        self.b: List[str] = []
        self.b_junk: Set[str] = set()
        self.b_popular: Set[str] = set()
        self._b2j: Dict[str, List[int]] = {}
        self._full_b_count: Optional[Counter] = None
        self._matching_blocks: Optional[List[Match]] = None
        self._opcodes: Optional[List[OpCode]] = None
        self.set_seqs(a, b)

    def set_seqs(self, a: Sequence[str], b: Sequence[str]) -> None:
        """Set both sequences to be compared."""
        self.set_seq1(a)
        self.set_seq2(b)

    def set_seq1(self, a: Sequence[str]) -> None:
        """Set the first sequence; information about the second is kept."""
        self.a = list(a) if a is not None else []
        self._matching_blocks = None
        self._opcodes = None

    def set_seq2(self, b: Sequence[str]) -> None:
        """Set the second sequence and rebuild the index over it."""
        self.b = list(b) if b is not None else []
        self._matching_blocks = None
        self._opcodes = None
        self._full_b_count = None
        self._chain_b()

    def _chain_b(self) -> None:
        b2j: Dict[str, List[int]] = defaultdict(list)
        for index, item in enumerate(self.b):
            b2j[item].append(index)

        self.b_junk = set()
        if self.is_junk is not None:
            self.b_junk = {item for item in b2j if self.is_junk(item)}
            for item in self.b_junk:
                del b2j[item]

        popular: Set[str] = set()
        n = len(self.b)
        if self.auto_junk and n >= 200:
            ntest = n // 100 + 1
            popular = {item for item, idxs in b2j.items() if len(idxs) > ntest}
            for item in popular:
                del b2j[item]
        self.b_popular = popular
        self._b2j = dict(b2j)

    def _find_longest_match(self, alo: int, ahi: int, blo: int, bhi: int) -> Match:
        a, b, junk = self.a, self.b, self.b_junk
        besti, bestj, bestsize = alo, blo, 0

        j2len: Dict[int, int] = {}
        for i in range(alo, ahi):
            new_j2len: Dict[int, int] = {}
            for j in self._b2j.get(a[i], ()):
                if j < blo:
                    continue
                if j >= bhi:
                    break
                k = j2len.get(j - 1, 0) + 1
                new_j2len[j] = k
                if k > bestsize:
                    besti, bestj, bestsize = i - k + 1, j - k + 1, k
            j2len = new_j2len

        for want_junk in (False, True):
            while (
                besti > alo
                and bestj > blo
                and (b[bestj - 1] in junk) == want_junk
                and a[besti - 1] == b[bestj - 1]
            ):
                besti, bestj, bestsize = besti - 1, bestj - 1, bestsize + 1
            while (
                besti + bestsize < ahi
                and bestj + bestsize < bhi
                and (b[bestj + bestsize] in junk) == want_junk
                and a[besti + bestsize] == b[bestj + bestsize]
            ):
                bestsize += 1

        return Match(besti, bestj, bestsize)

    def get_matching_blocks(self) -> List[Match]:
        """Return the matching blocks, ending with a ``(len(a), len(b), 0)`` sentinel.

        Blocks increase in both indices and adjacent blocks are merged.
        """
        if self._matching_blocks is not None:
            return self._matching_blocks

        matched: List[Match] = []
        pending = [(0, len(self.a), 0, len(self.b))]
        while pending:
            alo, ahi, blo, bhi = pending.pop()
            match = self._find_longest_match(alo, ahi, blo, bhi)
            i, j, k = match
            if k > 0:
                matched.append(match)
                if alo < i and blo < j:
                    pending.append((alo, i, blo, j))
                if i + k < ahi and j + k < bhi:
                    pending.append((i + k, ahi, j + k, bhi))
        matched.sort()

        non_adjacent: List[Match] = []
        i1 = j1 = k1 = 0
        for i2, j2, k2 in matched:
            if i1 + k1 == i2 and j1 + k1 == j2:
                k1 += k2
            else:
                if k1 > 0:
                    non_adjacent.append(Match(i1, j1, k1))
                i1, j1, k1 = i2, j2, k2
        if k1 > 0:
            non_adjacent.append(Match(i1, j1, k1))
        non_adjacent.append(Match(len(self.a), len(self.b), 0))

        self._matching_blocks = non_adjacent
        return non_adjacent

    def get_opcodes(self) -> List[OpCode]:
        """Return the edit steps that turn ``a`` into ``b``."""
        if self._opcodes is not None:
            return self._opcodes
        i = j = 0
        opcodes: List[OpCode] = []
        for ai, bj, size in self.get_matching_blocks():
            if i < ai and j < bj:
                tag = "r"
            elif i < ai:
                tag = "d"
            elif j < bj:
                tag = "i"
            else:
                tag = ""
            if tag:
                opcodes.append(OpCode(tag, i, ai, j, bj))
            i, j = ai + size, bj + size
            if size > 0:
                opcodes.append(OpCode("e", ai, i, bj, j))
        self._opcodes = opcodes
        return opcodes

    def get_grouped_opcodes(self, n: int = 3) -> List[List[OpCode]]:
        """Group opcodes into change clusters with up to ``n`` lines of context.

        A negative ``n`` means the default of three.
        """
        if n < 0:
            n = 3
        codes = list(self.get_opcodes()) or [OpCode("e", 0, 1, 0, 1)]

        first = codes[0]
        if first.tag == "e":
            codes[0] = OpCode(
                "e", max(first.i1, first.i2 - n), first.i2,
                max(first.j1, first.j2 - n), first.j2,
            )
        last = codes[-1]
        if last.tag == "e":
            codes[-1] = OpCode(
                "e", last.i1, min(last.i2, last.i1 + n),
                last.j1, min(last.j2, last.j1 + n),
            )

        nn = n + n
        groups: List[List[OpCode]] = []
        group: List[OpCode] = []
        for tag, i1, i2, j1, j2 in codes:
            if tag == "e" and i2 - i1 > nn:
                group.append(OpCode(tag, i1, min(i2, i1 + n), j1, min(j2, j1 + n)))
                groups.append(group)
                group = []
                i1, j1 = max(i1, i2 - n), max(j1, j2 - n)
            group.append(OpCode(tag, i1, i2, j1, j2))
        if group and not (len(group) == 1 and group[0].tag == "e"):
            groups.append(group)
        return groups

    def ratio(self) -> float:
        """Return the similarity ``2*M/T`` of the sequences, in ``[0, 1]``."""
        matches = sum(block.size for block in self.get_matching_blocks())
        return _calculate_ratio(matches, len(self.a) + len(self.b))

    def quick_ratio(self) -> float:
        """Return an upper bound on :meth:`ratio`, computed quickly."""
        if self._full_b_count is None:
            self._full_b_count = Counter(self.b)
        avail: Dict[str, int] = {}
        matches = 0
        for item in self.a:
            count = avail.get(item, self._full_b_count[item])
            avail[item] = count - 1
            if count > 0:
                matches += 1
        return _calculate_ratio(matches, len(self.a) + len(self.b))

    def real_quick_ratio(self) -> float:
        """Return an upper bound on :meth:`ratio`, computed very quickly."""
        la, lb = len(self.a), len(self.b)
        return _calculate_ratio(min(la, lb), la + lb)