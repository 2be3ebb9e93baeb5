from .supabase import SupabaseDatabase

__all__ = ["SupabaseDatabase"]
