#!/usr/bin/env python3
"""
Registration form entrypoint - runs the launcher from a source checkout.
"""

import sys
from pathlib import Path

# Add project root to path for imports (registration/, tui/ and util/ are in project root)
sys.path.insert(0, str(Path(__file__).parent.parent))

from tui.run import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
