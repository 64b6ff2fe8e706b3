"""Demo data for Boardshop.

This package seeds a development database with the skate shop's
categories, two login accounts and a handful of products. It is not
needed in production.

Usage:
    poetry run seed-demo
    # or
    python -m boardshop_demo.seed
"""

__version__ = "0.1.0"
