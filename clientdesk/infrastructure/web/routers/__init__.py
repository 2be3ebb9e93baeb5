from . import clients, projects

__all__ = ["clients", "projects"]
