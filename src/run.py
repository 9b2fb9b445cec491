import sys
from pathlib import Path

# --- Add ROOT for imports ---
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from autoimport_prefs.app import main

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
