"""
Core domain model and arithmetic primitives.

This module contains the digit-group number representation, its decimal
codec and the arithmetic built on top of it. It is independent of any
input/output surface.
"""
