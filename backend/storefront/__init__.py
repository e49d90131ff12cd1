"""
Storefront - e-commerce domain core

Users, product catalog and carts built on a small typed-functional runtime
(Result / Option / Either) that threads validation failures through entity
construction.

Author: TM3
Date: 2026-10-12
"""
__version__ = "1.0.0"
