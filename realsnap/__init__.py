"""
RealSnap: upload an image, get a verification link and QR code back.
"""

__version__ = "0.1.0"
