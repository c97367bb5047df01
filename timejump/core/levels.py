"""Built-in level maps, one constant string per level.

Legend:
  P  entrance + player spawn      K  key          W  sword
  E  exit (starts locked)         -  O  |  ground ^  spike
  v  ceiling spike                F  fake block   I  invisible block
  B  goblin    A  archer          Z  boss (also starts the boss music)
"""

from __future__ import annotations

from typing import Sequence

LEVEL_1 = """\



  P    W                 B        |          B    K        E
---------------   ---------------------------------------------
---------------^^^---------------------------------------------
"""

LEVEL_2 = """\

          vvvv

  P                 A                     I        K           E
--------------   -----------OOOO----FFFF----------------------------
--------------^^^-----------OOOO----^^^^----------------------------
"""

LEVEL_3 = """\



  P      |          B                         Z          K      E
-------------------------------------------------------------------
-------------------------------------------------------------------
"""

LEVELS: tuple[str, ...] = (LEVEL_1, LEVEL_2, LEVEL_3)


def next_level_index(index: int, levels: Sequence[str] = LEVELS) -> int | None:
    """Return the level after *index*, or None when the sequence is exhausted."""
    nxt = index + 1
    return nxt if nxt < len(levels) else None
