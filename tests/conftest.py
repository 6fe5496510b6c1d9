import os
import sys
from pathlib import Path

# Ensure the repo root is on sys.path so `import teamscard` works without an install.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Test-suite guardrails: a developer shell may export a real webhook or proxy.
for _k in list(os.environ):
    if _k.upper().startswith("TEAMS_"):
        os.environ.pop(_k, None)
