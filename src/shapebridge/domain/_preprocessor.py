"""
Input preprocessor interface definitions.

This module defines the domain-level interface (Protocol) for input
preprocessors in shapebridge.

An input preprocessor sits between two layers whose activations have
different ranks (e.g. a 3D convolution followed by a dense layer). It
reshapes activations on the way forward, reshapes epsilons on the way back,
infers the input type seen by the next layer, and propagates the mask array.

Design notes
------------
- Preprocessors are **stateless** apart from a few immutable integer/flag
  configuration fields. They hold no trainable parameters and never retain
  references to the tensors passing through them.
- Equality is value equality over the configuration fields; `clone()`
  returns an independent instance with the same configuration.
- The interface is backend-agnostic and does not depend on NumPy.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Protocol, Tuple, runtime_checkable

from ._input_type import InputType
from ._mask_state import MaskState
from ._tensor import ITensor


@runtime_checkable
class IInputPreProcessor(Protocol):
    """
    Protocol for input preprocessors.

    Notes
    -----
    - `pre_process` and `backprop` are inverse shape transformations.
    - Both return their argument unchanged when it already has the target
      rank (pass-through).
    - `minibatch_size` is a hint only; implementations read the batch size
      from the tensor itself.
    """

    def pre_process(self, x: ITensor, minibatch_size: int) -> ITensor:
        """
        Reshape activations produced by the previous layer.

        Parameters
        ----------
        x : ITensor
            Activations of the previous layer.
        minibatch_size : int
            Number of examples in the minibatch.

        Returns
        -------
        ITensor
            Activations in the shape expected by the next layer.
        """
        ...

    def backprop(self, epsilons: ITensor, minibatch_size: int) -> ITensor:
        """
        Reshape epsilons (errors / gradients) from the next layer back into
        the shape of the previous layer's activations.

        Parameters
        ----------
        epsilons : ITensor
            Epsilons in the next layer's activation shape.
        minibatch_size : int
            Number of examples in the minibatch.

        Returns
        -------
        ITensor
            Epsilons in the previous layer's activation shape.
        """
        ...

    def get_output_type(self, input_type: Optional[InputType]) -> InputType:
        """
        Infer the input type seen by the next layer.

        Parameters
        ----------
        input_type : Optional[InputType]
            Output type of the previous layer.

        Returns
        -------
        InputType
            Input type after preprocessing.
        """
        ...

    def feed_forward_mask_array(
        self,
        mask: Optional[ITensor],
        current_mask_state: Optional[MaskState],
        minibatch_size: int,
    ) -> Tuple[Optional[ITensor], Optional[MaskState]]:
        """
        Propagate the mask array (and its state) through the preprocessor.
        """
        ...

    def clone(self) -> "IInputPreProcessor":
        """
        Return an independent copy with identical configuration.
        """
        ...

    def get_config(self) -> Dict[str, Any]:
        """
        Return a JSON-serializable configuration dictionary.
        """
        ...
