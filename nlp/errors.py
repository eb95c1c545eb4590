"""
Typed failures raised while building a nodule descriptor.
"""


class NoduleExtractionError(Exception):
    """
    Base class for sentences that cannot be turned into a descriptor.

    Attributes:
        kind: Stable machine-readable identifier of the failure
        message: Text suitable for showing to the user
    """
    kind = "extraction_error"
    default_message = "The text could not be interpreted as a nodule finding."

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self):
        return {"kind": self.kind, "message": self.message}


class NotANoduleReference(NoduleExtractionError):
    """The text does not mention a nodule at all."""
    kind = "not_a_nodule_reference"
    default_message = "The selected text does not reference a nodule."


class MeasurementNotFound(NoduleExtractionError):
    """A nodule is mentioned but no measurement with a mm/cm unit was found."""
    kind = "measurement_not_found"
    default_message = (
        "No nodule measurement was found. Expected 1 to 3 dimensions "
        "followed by mm or cm, e.g. \"7 x 8 mm\"."
    )
