"""
Client dashboard backend: clients, their projects and tasks, with
per-client statistics, a filterable table and CSV export.
"""

__version__ = "1.0.0"
