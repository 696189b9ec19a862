from typing import Union, Iterable

from tqdm import tqdm


__pdoc__ = {"_unit_wrapper": False}


def _unit_wrapper(
    blocks: Iterable, progress_bar: bool = False, total: Union[int, None] = None
) -> Union[Iterable, tqdm]:
    """Wraps per-unit blocks with tqdm if progress_bar is True, else returns blocks."""
    if progress_bar:
        return tqdm(blocks, total=total, desc="units")
    else:
        return blocks
