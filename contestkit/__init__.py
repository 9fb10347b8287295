"""Solutions to small programming-contest problems: text, decision and sequence problems."""

__version__ = "0.1.0"
__all__ = ["text", "decisions", "sequences"]