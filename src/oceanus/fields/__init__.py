"""Fields."""

from oceanus.fields.core import (
    CELL,
    EDGE_XY,
    FACE_X,
    FACE_Y,
    FACE_Z,
    Field,
    Location,
)
from oceanus.fields.sets import (
    ForcingFields,
    OperatorTemporaryFields,
    PressureFields,
    SourceTerms,
    StepperTemporaryFields,
    TracerFields,
    VelocityFields,
)

__all__ = [
    "CELL",
    "EDGE_XY",
    "FACE_X",
    "FACE_Y",
    "FACE_Z",
    "Field",
    "ForcingFields",
    "Location",
    "OperatorTemporaryFields",
    "PressureFields",
    "SourceTerms",
    "StepperTemporaryFields",
    "TracerFields",
    "VelocityFields",
]
