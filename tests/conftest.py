import os
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Allow running the suite from a checkout without installing the package.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Qt widgets, pixmaps and cursors need a platform plugin; tests run headless.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
