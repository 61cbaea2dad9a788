from __future__ import annotations

import json
from pathlib import Path
import sys

# Ensure `backend/` is on sys.path so `import lenormand_board` works.
BACKEND_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(BACKEND_DIR))

from lenormand_board.api import ReadingEngine
from lenormand_board.core import SpreadType, ascii_board


def show(title: str, eng: ReadingEngine) -> None:
    print("\n" + "=" * 72)
    print(title)
    print(ascii_board(eng.board, eng.selected))
    marked = [f"{i}:{h}" for i, h in enumerate(eng.highlights()) if h is not None]
    print("Highlights:", " ".join(marked) or "-")


def demo_grand_tableau() -> None:
    eng = ReadingEngine(SpreadType.GRAND_TABLEAU, rng_seed=7)

    eng.select(0)
    show("Demo 1: corner house, frame + knight + lower diagonal", eng)

    eng.select(13)
    show("Demo 2: inner house, three mirrors and six knight moves", eng)
    print(json.dumps(eng.context(theme="Work"), ensure_ascii=False, indent=2))

    eng.select(33)
    show("Demo 3: verdict house, outside every relation", eng)


def demo_clock() -> None:
    eng = ReadingEngine(SpreadType.CLOCK, rng_seed=7)

    eng.select(3)
    show("Demo 4: clock house 4, emotional axis", eng)
    print(json.dumps(eng.context(), ensure_ascii=False, indent=2))

    eng.select(12)
    show("Demo 5: clock center, no opposite", eng)


if __name__ == "__main__":
    demo_grand_tableau()
    demo_clock()
