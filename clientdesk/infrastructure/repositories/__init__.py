"""
Infrastructure repositories module.
Supabase implementations of the domain repository interfaces.
"""

from .client_repository import SupabaseClientRepository
from .project_repository import SupabaseProjectRepository
from .task_repository import SupabaseTaskRepository

__all__ = [
    "SupabaseClientRepository",
    "SupabaseProjectRepository",
    "SupabaseTaskRepository",
]
