"""Internship compliance-cycle library.

Derives the monthly report/visit obligations of an internship from its dates
and answers the compliance questions dashboards ask of them.

Key modules:
- cycle: Monthly cycle generation, due dates and per-cycle status
- progress: Expected-vs-actual counters and institution aggregation
- config: Library-wide defaults
- utils: Date normalization helpers
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Main modules are imported via subpackages
    "cycle",
    "progress",
    "config",
    "utils",
]
