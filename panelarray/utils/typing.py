from numpy.typing import NDArray
from narwhals.typing import IntoDataFrame, IntoSeries
from typing import Union, List, Sequence


ArrayLike = Union[IntoDataFrame, IntoSeries, NDArray]

Partition = List[range]

Counts = Union[Sequence[int], NDArray]
