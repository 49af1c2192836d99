"""Stratum pool request builders, job data types and 256-bit target arithmetic."""

__version__ = "1.2.4"
__all__ = ["uint256", "arith", "jobs", "messages"]