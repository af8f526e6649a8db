"""Main entry point for the Streamlit app.

Run with ``streamlit run budget_dashboard/Home.py``.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent.resolve()
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

try:
    from budget_dashboard.dashboard import main
except ImportError:
    from dashboard import main

if __name__ == "__main__":
    main()
