from __future__ import annotations
from typing import List, Optional

from baccarat_roads.core.round import Outcome

_SEPARATORS = [",", ";", "|", "/", "\\", "\n", "\t", " "]

_TOKENS = {
    "b": Outcome.BANKER_WIN, "banker": Outcome.BANKER_WIN, "2": Outcome.BANKER_WIN,
    "p": Outcome.PLAYER_WIN, "player": Outcome.PLAYER_WIN, "1": Outcome.PLAYER_WIN,
    "t": Outcome.TIE, "tie": Outcome.TIE, "3": Outcome.TIE,
}


def is_positive_int(n) -> bool:
    # bool is an int subclass but never a valid dimension
    return isinstance(n, int) and not isinstance(n, bool) and n > 0


def map_outcome(token: str) -> Optional[Outcome]:
    t = token.strip().lower()
    if not t:
        return None
    return _TOKENS.get(t)


def parse_outcomes(s: str) -> List[Outcome]:
    """Read a free-form list like "B P, tie" or "BPPT" into outcomes; unknown tokens are skipped."""
    for sp in _SEPARATORS[1:]:
        s = s.replace(sp, _SEPARATORS[0])
    toks = [x for x in s.split(_SEPARATORS[0]) if x.strip() != ""]
    out: List[Outcome] = []
    for tk in toks:
        lab = map_outcome(tk)
        if lab is not None:
            out.append(lab)
            continue
        # compact form, one character per round
        chars = [map_outcome(ch) for ch in tk]
        if all(c is not None for c in chars):
            out.extend(chars)
    return out
