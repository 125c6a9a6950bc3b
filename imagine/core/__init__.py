"""
Core value type, numeric primitives and contracts.

Everything here is pure computation: no I/O and no state besides the
process-wide precision context.
"""
