"""Expansion of root paths into the list of paths to archive.

Traversal is best-effort: anything that cannot be stat'ed or listed while
walking is left out instead of failing the run. Symbolic links are followed;
a link that leads back to a directory already on the current descent chain is
dropped so cyclic links cannot recurse forever.
"""

from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import Iterable


def _stat(path: str | Path) -> os.stat_result | None:
    try:
        return os.stat(path)
    except OSError:
        return None


def resolve(root: Path) -> list[Path]:
    root = Path(root)
    st = _stat(root)
    if st is None:
        return []
    if stat.S_ISREG(st.st_mode):
        return [root]

    found = [root]
    if not stat.S_ISDIR(st.st_mode):
        return found

    # dirpath -> (dev, ino) of every directory from the root down to it
    chains: dict[str, frozenset] = {os.fspath(root): frozenset({(st.st_dev, st.st_ino)})}

    for dirpath, dirnames, filenames in os.walk(root, followlinks=True):
        chain = chains.pop(dirpath, frozenset())
        base = Path(dirpath)
        dirnames.sort()
        filenames.sort()

        descend = []
        for name in dirnames:
            child = os.path.join(dirpath, name)
            child_st = _stat(child)
            if child_st is None:
                continue
            key = (child_st.st_dev, child_st.st_ino)
            if key in chain:
                continue
            chains[child] = chain | {key}
            descend.append(name)
            found.append(base / name)
        dirnames[:] = descend

        for name in filenames:
            # broken links and entries that vanished mid-walk
            if _stat(os.path.join(dirpath, name)) is None:
                continue
            found.append(base / name)

    return found


def resolve_all(roots: Iterable[Path]) -> list[Path]:
    paths: list[Path] = []
    for root in roots:
        paths.extend(resolve(root))
    return paths
