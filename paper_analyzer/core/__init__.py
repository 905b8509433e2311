"""Core domain logic: document processing, retrieval QA, and exceptions."""
