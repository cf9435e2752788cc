#!/usr/bin/env python3
"""
Fail CI on bare `except:` in the fast_view_cut package (or given files/dirs).

- Scans only *.py.
- Matches Python syntax line:  ^\s*except\s*:\s*(#.*)?$
"""

from __future__ import annotations

import argparse
import os
import re
import sys
from dataclasses import dataclass
from typing import Iterable, List


BARE_EXCEPT_RE = re.compile(r"^\s*except\s*:\s*(#.*)?$")
DEFAULT_PATHS = ["fast_view_cut"]


@dataclass(frozen=True)
class Hit:
    path: str
    lineno: int
    line: str


def _iter_py_files(target: str) -> Iterable[str]:
    if os.path.isfile(target):
        if target.endswith(".py"):
            yield target
        return

    for root, _, files in os.walk(target):
        for fn in files:
            if fn.endswith(".py"):
                yield os.path.join(root, fn)


def scan(paths: List[str]) -> List[Hit]:
    """Return every bare `except:` line under `paths` (sorted by file)."""
    files: List[str] = []
    for p in paths:
        if not os.path.exists(p):
            raise SystemExit(f"Path not found: {p}")
        files.extend(_iter_py_files(p))

    hits: List[Hit] = []
    for p in sorted(set(files)):
        with open(p, "r", encoding="utf-8", errors="replace") as f:
            for idx, line in enumerate(f, start=1):
                if BARE_EXCEPT_RE.match(line):
                    hits.append(Hit(path=p.replace("\\", "/"), lineno=idx, line=line.rstrip("\n")))
    return hits


def main(argv: List[str]) -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("--paths", nargs="+", default=DEFAULT_PATHS, help="Files/dirs to scan")
    args = ap.parse_args(argv)

    hits = scan(args.paths)
    if hits:
        print("ERROR: bare `except:` detected (must be `except Exception as e:` or narrower):")
        for h in hits:
            print(f"  {h.path}:{h.lineno}: {h.line.strip()}")
        print("")
        print("Fix: catch `Exception` or narrower and record the failure in Diagnostics.")
        return 2

    print("OK: no bare `except:` found in scanned paths.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
