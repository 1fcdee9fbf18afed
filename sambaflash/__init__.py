"""Serial ports, applets, file errors and Tk windows for SAM-BA flash programming."""

__version__ = "0.1.0"