"""
Post sample selection payloads to a running bridge.

Usage:
  python scripts/post_selection.py          # sends both samples
  python scripts/post_selection.py A        # sends sample A only
  python scripts/post_selection.py B --endpoint http://127.0.0.1:4000/selection
"""
import sys

from grab_bridge.client import main

if __name__ == "__main__":
    sys.exit(main())
