"""Core domain models, interfaces and services for bond perception."""
