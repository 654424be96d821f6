"""
Utility functions module.

Unit conversion and rounding helpers shared by the formulas, the engine
and the discount allocator. Every function here is pure.
"""
