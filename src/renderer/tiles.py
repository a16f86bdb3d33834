# renderer/tiles.py
from typing import List, NamedTuple

class TileBounds(NamedTuple):
    """Half-open pixel rectangle [x0, x1) x [y0, y1); row 0 is the top of the image."""
    x0: int
    y0: int
    x1: int
    y1: int

    @property
    def width(self) -> int:
        return self.x1 - self.x0

    @property
    def height(self) -> int:
        return self.y1 - self.y0

def tile_count(tile_size: int, dimension: int) -> int:
    """Number of tiles needed to cover `dimension` pixels."""
    return (dimension + tile_size - 1) // tile_size

def get_tile_bounds(tile_idx: int, tile_size: int, width: int, height: int) -> TileBounds:
    """
    Bounds of a tile; tiles are counted row-major from the top-left, and
    the last row and column are clipped to the image.
    """
    n_tiles_x = tile_count(tile_size, width)
    tile_x = tile_idx % n_tiles_x
    tile_y = tile_idx // n_tiles_x
    x0 = tile_x * tile_size
    y0 = tile_y * tile_size
    return TileBounds(x0, y0, min(x0 + tile_size, width), min(y0 + tile_size, height))

def make_tiles(tile_size: int, width: int, height: int) -> List[TileBounds]:
    n = tile_count(tile_size, width) * tile_count(tile_size, height)
    return [get_tile_bounds(i, tile_size, width, height) for i in range(n)]

def assign_tiles(tiles: List[TileBounds], workers: int) -> List[List[TileBounds]]:
    """
    Static round-robin split: worker k gets tiles k, k + workers, ...
    """
    return [tiles[k::workers] for k in range(workers)]
