from __future__ import annotations

import re
from typing import Optional

from mkfile.core.model import BraceGroup


# First `{` and the first `}` after it; the suffix keeps everything else verbatim.
_GROUP_RE = re.compile(r"^(?P<prefix>[^{]*)\{(?P<items>[^}]*)\}(?P<suffix>.*)$", re.DOTALL)

SEPARATORS = ("/", "\\")


def find_brace_group(token: str) -> Optional[BraceGroup]:
    """Return the first `{...}` group of `token`, or None.

    Both delimiters must be present; a lone `{` or `}` is not a group.
    """
    m = _GROUP_RE.match(token)
    if m is None:
        return None
    return BraceGroup(prefix=m.group("prefix"), items_text=m.group("items"), suffix=m.group("suffix"))


def split_items(items_text: str) -> list[str]:
    """Split on commas first, then on whitespace inside each segment.

    `"a, b c,,d"` -> `["a", "b", "c", "d"]`. Empty pieces are dropped.
    """
    items: list[str] = []
    for segment in items_text.split(","):
        items.extend(segment.split())
    return items


def normalize_prefix(prefix: str) -> str:
    """Append `/` to a directory-like prefix that doesn't already end in a separator.

    A prefix with no separator at all (`"a"` in `a{1,2}b`) is a filename stem and
    is left untouched.
    """
    if not prefix or prefix.endswith(SEPARATORS):
        return prefix
    if any(sep in prefix for sep in SEPARATORS):
        return prefix + "/"
    return prefix


def expand_token(token: str) -> list[str]:
    """Expand the first brace group of `token` into concrete paths.

    Never raises. A token without a group expands to itself; a group with no
    items (`{}`, `{ , }`) expands to nothing.
    """
    group = find_brace_group(token)
    if group is None:
        return [token]

    prefix = normalize_prefix(group.prefix)
    return [f"{prefix}{item}{group.suffix}" for item in split_items(group.items_text)]
