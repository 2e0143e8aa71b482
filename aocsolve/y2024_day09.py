"""Compacting an amphipod's disk and computing the filesystem checksum."""

from __future__ import annotations

from itertools import groupby

FREE = -1
_DIGITS = frozenset("0123456789")


def _parse(text: str) -> list[int]:
    digits = text.strip()
    if not digits or not set(digits) <= _DIGITS:
        raise ValueError("disk map must be a non-empty string of digits")
    return [int(char) for char in digits]


def _layout(sizes: list[int]) -> list[int]:
    blocks: list[int] = []
    for index, size in enumerate(sizes):
        owner = index // 2 if index % 2 == 0 else FREE
        blocks.extend([owner] * size)
    return blocks


def part_one(text: str) -> int:
    """Checksum after moving single blocks from the end into the leftmost gaps."""
    blocks = _layout(_parse(text))
    files = [block for block in blocks if block != FREE]
    from_end = reversed(files)
    compacted = [
        block if block != FREE else next(from_end) for block in blocks[: len(files)]
    ]
    return sum(position * block for position, block in enumerate(compacted))


def part_two(text: str) -> int:
    """Checksum after moving whole files, highest id first, into the leftmost fitting gap."""
    sizes = _parse(text)
    blocks = _layout(sizes)

    files: list[tuple[int, int, int]] = []
    position = 0
    for index, size in enumerate(sizes):
        if index % 2 == 0:
            files.append((index // 2, position, size))
        position += size

    gaps: list[list[int]] = []
    position = 0
    for owner, run in groupby(blocks):
        length = len(list(run))
        if owner == FREE:
            gaps.append([position, length])
        position += length

    checksum = 0
    for file_id, start, length in reversed(files):
        if length == 0:
            continue
        target = start
        for gap in gaps:
            if gap[0] >= start:
                break
            if gap[1] >= length:
                target = gap[0]
                gap[0] += length
                gap[1] -= length
                if gap[1] == 0:
                    gaps.remove(gap)
                break
        checksum += file_id * sum(range(target, target + length))
    return checksum