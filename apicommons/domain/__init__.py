"""Framework-independent value types.

This package holds the result and pagination primitives that services pass
around, independent from how FastAPI or SQLAlchemy consume them.
"""
