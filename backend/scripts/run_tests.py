#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys
from pathlib import Path
import unittest

BACKEND_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(BACKEND_DIR))


def main() -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("-p", "--pattern", default="test*.py", help="test module glob, e.g. test_geometry.py")
    ap.add_argument("-q", "--quiet", action="store_true")
    args = ap.parse_args()

    suite = unittest.defaultTestLoader.discover(str(BACKEND_DIR / "tests"), pattern=args.pattern)
    runner = unittest.TextTestRunner(verbosity=1 if args.quiet else 2)
    res = runner.run(suite)
    return 0 if res.wasSuccessful() else 1


if __name__ == "__main__":
    raise SystemExit(main())
