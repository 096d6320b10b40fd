"""Infrastructure Layer — database access, migrations, and logging.

Invariants:
    - Infrastructure never holds domain state; it adapts IO to core protocols
    - All SQLAlchemy failures mapped to core errors before leaving this layer
"""
