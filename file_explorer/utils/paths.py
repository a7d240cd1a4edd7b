from __future__ import annotations

import os
from typing import Optional

"""Path helpers for the user's home directory.

`os.path.expanduser` takes the home directory from HOME and, when that is
unset, from the user database entry of the current user.
"""


def expand_home(path: str) -> Optional[str]:
    """Replace a leading '~' (alone or followed by a separator) with the home directory.

    Returns None when the path needs the home directory and it cannot be found.
    Other paths, including '~user' forms, are returned unchanged.
    """
    if path != "~" and not path.startswith("~" + os.sep):
        return path
    expanded = os.path.expanduser(path)
    if expanded.startswith("~"):
        return None
    return expanded
