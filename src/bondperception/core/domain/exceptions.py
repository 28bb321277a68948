"""Exception hierarchy for bond perception."""


class BondPerceptionError(Exception):
    """Base class for all bond perception errors."""


class StructureError(BondPerceptionError, ValueError):
    """Raised for structurally invalid input.

    Covers atom/coordinate count mismatches, malformed numeric fields in
    geometry input and bond rows that reference atoms outside the molecule.
    """


class FeatureShapeError(BondPerceptionError, ValueError):
    """Raised when a feature row does not match the width of its header."""


class PredictionError(BondPerceptionError, RuntimeError):
    """Raised when the classifier boundary fails.

    This includes an unavailable model, a prediction vector that is not
    row-aligned with the feature matrix and a missing prediction column.
    """
