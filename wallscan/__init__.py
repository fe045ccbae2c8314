# Floor plan wall extraction package

__version__ = "0.1.0"
