#!/usr/bin/env python3
"""
Generate an API test token; same as the ``tripadmin-gen-token`` console script.
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from tripadmin.commands.gen_token import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
