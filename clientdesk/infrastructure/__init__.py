"""
Infrastructure layer for the client dashboard.

This layer contains the implementation details for external systems integration:
- Data store (Supabase / PostgREST)
- Input validation rules
- CSV export
- HTTP interface (FastAPI)

The infrastructure layer implements interfaces defined in the domain layer.
"""
