"""
Mask state enumeration.

A mask array travels alongside activations to flag which examples (or time
steps) are valid. The mask state tells downstream layers how to treat it.
"""

from enum import Enum


class MaskState(Enum):
    """
    How a mask array should be interpreted by the next layer.

    Attributes
    ----------
    ACTIVE : MaskState
        The mask must be applied (masked steps are zeroed / ignored).
    PASSTHROUGH : MaskState
        The mask is carried along but not applied at this point.
    """

    ACTIVE = "Active"
    PASSTHROUGH = "Passthrough"
