#!/usr/bin/env python3
"""Direct launcher for the Budget Dashboard.

This script launches Streamlit with the budget_dashboard directory as the
app root.
"""

import sys
import subprocess
import os
from pathlib import Path

# Get the project root and budget_dashboard directory
project_root = Path(__file__).parent.resolve()
budget_dashboard_dir = project_root / "budget_dashboard"

if __name__ == "__main__":
    os.chdir(budget_dashboard_dir)
    # Add project root to path for imports
    sys.path.insert(0, str(project_root))
    subprocess.run([
        sys.executable, "-m", "streamlit", "run",
        "Home.py"
    ])
