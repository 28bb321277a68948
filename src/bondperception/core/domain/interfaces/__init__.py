"""Interfaces of external collaborators."""

from .bond_classifier import BondClassifier

__all__ = ["BondClassifier"]
