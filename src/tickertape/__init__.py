"""tickertape - live market ticker strip renderer"""

__version__ = "0.1.0"
