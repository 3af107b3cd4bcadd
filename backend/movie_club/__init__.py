"""Movie Club Application Package — REST API over movies and user accounts.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

__version__ = "1.0.0"
