"""
Application layer: DTOs, use cases and the clients table view-model.
"""
