"""
Discount Tool Package

Resolves a product's discounted sale price by applying exactly one discount
strategy, selected by the product's discount type, behind an authorization gate.
"""

__version__ = "1.0.0"
