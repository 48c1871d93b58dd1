"""BankShot - direct and bank shot solver for pocket billiards."""

__version__ = "1.0.0"
