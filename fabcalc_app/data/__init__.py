"""
Input data handling module.

Validation of calculation contracts and construction of contracts from
raw stored records.
"""
