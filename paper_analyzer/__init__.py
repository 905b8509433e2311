"""Research paper analyzer: retrieval-augmented summaries of uploaded PDFs."""

__version__ = "0.1.0"
