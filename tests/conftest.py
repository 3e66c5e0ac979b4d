import os
import sys

# flat module layout: `pytest` from the repo root works with or without `pip install -e .`
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))
