"""
=============================================================================
REQUEST HANDLERS
=============================================================================

    static.py   Request line → (status, file) decision

=============================================================================
"""

from .static import Outcome, process_command

__all__ = ["Outcome", "process_command"]
