"""Study notes generation from PDF documents.

This package provides:
- A FastAPI gateway that forwards extracted text to a local language model
- Normalization of the model's reply and HTML rendering of the notes
- A client session that extracts PDF text and drives the gateway
"""

__version__ = "0.1.0"
