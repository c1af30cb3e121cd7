"""A world of numbered blocks stacked in piles and moved by text commands."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Sequence


class BlockWorld:
    """Piles of blocks; block ``i`` starts alone in pile ``i``."""

    def __init__(self, count: int) -> None:
        if count < 0:
            raise ValueError(f"count must not be negative: {count}")
        self._piles: list[list[int]] = [[block] for block in range(count)]

    def _locate(self, block: int) -> tuple[list[int], int] | None:
        for pile in self._piles:
            if block in pile:
                return pile, pile.index(block)
        return None

    def _places(self, src: int, dst: int) -> tuple[list[int], int, list[int], int] | None:
        """Positions of both blocks, or None when the command must be ignored."""
        if src == dst:
            return None
        found_src, found_dst = self._locate(src), self._locate(dst)
        if found_src is None or found_dst is None or found_src[0] is found_dst[0]:
            return None
        return (*found_src, *found_dst)

    def move_onto(self, src: int, dst: int) -> None:
        """Take ``src`` alone out of its pile and put it directly above ``dst``."""
        places = self._places(src, dst)
        if places is None:
            return
        src_pile, src_pos, dst_pile, dst_pos = places
        del src_pile[src_pos]
        dst_pile.insert(dst_pos + 1, src)

    def move_over(self, src: int, dst: int) -> None:
        """Take ``src`` alone out of its pile and put it on top of ``dst``'s pile."""
        places = self._places(src, dst)
        if places is None:
            return
        src_pile, src_pos, dst_pile, _ = places
        del src_pile[src_pos]
        dst_pile.append(src)

    def pile_onto(self, src: int, dst: int) -> None:
        """Move ``src`` and the blocks above it to sit directly above ``dst``."""
        places = self._places(src, dst)
        if places is None:
            return
        src_pile, src_pos, dst_pile, dst_pos = places
        moved = src_pile[src_pos:]
        del src_pile[src_pos:]
        dst_pile[dst_pos + 1 : dst_pos + 1] = moved

    def pile_over(self, src: int, dst: int) -> None:
        """Move ``src`` and the blocks above it to the top of ``dst``'s pile."""
        places = self._places(src, dst)
        if places is None:
            return
        src_pile, src_pos, dst_pile, _ = places
        dst_pile.extend(src_pile[src_pos:])
        del src_pile[src_pos:]

    def execute(self, line: str) -> bool:
        """Run one command line; return False on ``quit``. Unknown lines are ignored."""
        parts = line.split()
        if not parts:
            return True
        if parts[0] == "quit":
            return False
        if len(parts) != 4 or not (parts[1].isdigit() and parts[3].isdigit()):
            return True
        actions = {
            ("move", "onto"): self.move_onto,
            ("move", "over"): self.move_over,
            ("pile", "onto"): self.pile_onto,
            ("pile", "over"): self.pile_over,
        }
        action = actions.get((parts[0], parts[2]))
        if action is not None:
            action(int(parts[1]), int(parts[3]))
        return True

    def render(self) -> str:
        """One line per pile: its number, a colon and its blocks from bottom to top."""
        return "".join(
            f"{index}:" + "".join(f" {block}" for block in pile) + "\n"
            for index, pile in enumerate(self._piles)
        )


def run(lines: Iterable[str]) -> str:
    """Read a block count and commands; return the final layout once ``quit`` is seen.

    Without a ``quit`` line nothing is rendered and the empty string is returned.
    """
    stream = iter(lines)
    header = next(stream, None)
    if header is None or not header.strip():
        raise ValueError("missing block count")
    world = BlockWorld(int(header.split()[0]))
    for line in stream:
        if not world.execute(line):
            return world.render()
    return ""


def main(argv: Sequence[str] | None = None) -> int:
    """Read commands from standard input and print the final piles."""
    parser = argparse.ArgumentParser(
        prog="eulerkit-blocks",
        description="Move stacked blocks as directed by commands on standard input.",
    )
    parser.parse_args(argv)
    try:
        sys.stdout.write(run(sys.stdin.read().splitlines()))
    except ValueError as error:
        parser.error(str(error))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())