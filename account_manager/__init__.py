"""
Account Manager - Source Package

A menu-driven tracker for a single account balance.

DESIGN PRINCIPLES:
1. One balance, held in an explicit store and passed to the operations
2. Money is Decimal, always rounded to two places
3. Overdrafts are refused, never partially applied
4. Bad input is reported, never silently corrected
5. Every user action is auditable
"""

__version__ = "1.0.0"
__author__ = "Account Manager Team"
