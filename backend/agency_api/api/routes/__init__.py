"""Route Modules - one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with tags
    - Routes never touch SQLAlchemy; they call repositories via Depends
"""
