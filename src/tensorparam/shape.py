from dataclasses import dataclass
from typing import Iterable, Tuple, Union

Dims = Tuple[int, ...]
ShapeLike = Union["Shape", Iterable[int], int]


@dataclass(frozen=True)
class Shape:
    dims: Dims = ()

    def __post_init__(self):
        dims = tuple(int(d) for d in self.dims)
        for d in dims:
            if d < 0:
                raise ValueError(f"Negative dimension in shape {dims}")
        object.__setattr__(self, "dims", dims)

    @property
    def rank(self) -> int:
        return len(self.dims)

    @property
    def num_elements(self) -> int:
        """Product of the dimensions, 1 for a scalar shape."""
        n = 1
        for d in self.dims:
            n *= d
        return n

    def __len__(self) -> int:
        return len(self.dims)

    def __iter__(self):
        return iter(self.dims)


def as_shape(shape: ShapeLike) -> Shape:
    """Coerce an int, a sequence of ints or a ``torch.Size`` to a ``Shape``."""
    if isinstance(shape, Shape):
        return shape
    if isinstance(shape, int):
        return Shape((shape,))
    return Shape(tuple(shape))
