"""Core algorithm layer.

Subpackages:
- inventory: prefix index and stock ranking
- finance: bill selection under a budget
- crm: edit distance matching
- reporting: quick analytics
"""
__all__ = ["inventory", "finance", "crm", "reporting"]
