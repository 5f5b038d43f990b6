"""
FiltraFood: barcode -> Open Food Facts ingredients -> dietary filter verdict.
"""
__version__ = "1.0.0"
