from app.domains.access.policy import Operation, PERMISSIONS, authorize, is_allowed

__all__ = ["Operation", "PERMISSIONS", "authorize", "is_allowed"]
