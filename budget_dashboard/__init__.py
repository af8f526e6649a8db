"""Top‑level package for the Budget Dashboard.

The primary modules are:

* ``ledger`` – the ``BudgetLedger`` holding one month of income,
  commitments, savings goals and daily expenses
* ``calculations`` – pure budget, totals, balance and chart projections
* ``visualization`` – functions that generate Plotly figures
* ``dashboard`` – the Streamlit page that ties everything together

To run the dashboard from the command line you can execute:

```bash
streamlit run budget_dashboard/Home.py
```
"""

from . import calculations  # noqa: F401  # re-exported for convenience
from . import ledger  # noqa: F401  # re-exported for convenience
from .ledger import BudgetLedger  # noqa: F401
# Import dashboard lazily.  Streamlit may not be installed in all
# environments (e.g. during unit testing).
try:
    from . import dashboard  # type: ignore  # noqa: F401
except ModuleNotFoundError:
    dashboard = None  # type: ignore


__all__ = ["calculations", "ledger", "BudgetLedger", "dashboard"]
