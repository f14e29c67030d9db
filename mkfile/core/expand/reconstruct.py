from __future__ import annotations

from typing import Iterable


def reconstruct_tokens(args: Iterable[str]) -> list[str]:
    """Rejoin argv into file-spec tokens.

    The shell has already split quoted brace groups such as `"dir/{a, b}.txt"`
    on spaces. Joining everything back with single spaces and splitting only on
    spaces outside `{...}` recovers the original tokens.

    An unterminated `{` keeps the flag set, so every following space stays
    inside one token.
    """

    joined = " ".join(args)

    tokens: list[str] = []
    current: list[str] = []
    in_braces = False

    for ch in joined:
        if ch == "{":
            in_braces = True
            current.append(ch)
        elif ch == "}":
            in_braces = False
            current.append(ch)
        elif ch == " " and not in_braces:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(ch)

    if current:
        tokens.append("".join(current))

    return tokens
