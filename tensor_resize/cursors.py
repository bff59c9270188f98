from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

Array = np.ndarray


class Decoder(ABC):
    """Read cursor over a flat buffer of real values."""

    @abstractmethod
    def at(self, offset: int) -> "Decoder":
        """Seek to a flat element offset and return the cursor."""
        raise NotImplementedError

    @abstractmethod
    def get(self) -> np.float32:
        raise NotImplementedError

    @abstractmethod
    def __len__(self) -> int:
        raise NotImplementedError


class Encoder(ABC):
    """Write cursor over a flat buffer of real values."""

    @abstractmethod
    def at(self, offset: int) -> "Encoder":
        raise NotImplementedError

    @abstractmethod
    def set(self, value: float) -> None:
        raise NotImplementedError

    @abstractmethod
    def __len__(self) -> int:
        raise NotImplementedError


class ArrayDecoder(Decoder):
    def __init__(self, array: Array):
        self._flat = np.asarray(array).reshape(-1)
        self._offset = 0

    def at(self, offset: int) -> "ArrayDecoder":
        self._offset = offset
        return self

    def get(self) -> np.float32:
        return np.float32(self._flat[self._offset])

    def __len__(self) -> int:
        return self._flat.size


class ArrayEncoder(Encoder):
    """Writes in place into `array`, which must be C-contiguous."""

    def __init__(self, array: Array):
        if not isinstance(array, np.ndarray) or not array.flags.c_contiguous:
            raise ValueError("ArrayEncoder needs a C-contiguous numpy array")
        if not array.flags.writeable:
            raise ValueError("ArrayEncoder needs a writeable array")
        self._flat = array.reshape(-1)
        self._offset = 0

    def at(self, offset: int) -> "ArrayEncoder":
        self._offset = offset
        return self

    def set(self, value: float) -> None:
        self._flat[self._offset] = value

    def __len__(self) -> int:
        return self._flat.size
