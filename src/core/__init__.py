"""
Core domain types, numeric primitives, and contracts.

Independent of any rendering surface: tokens, the operator table, the
compiled program, and the IEEE-754-total built-ins it evaluates with.
"""
