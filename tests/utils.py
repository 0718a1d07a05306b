
from rasterdraw import RasterBuffer

Point = tuple[int, int]

def touched(buf: RasterBuffer, background=None) -> set[Point]:
    """Pixels that differ from the background color."""
    background = tuple(background or buf.background)
    return {
        (x, y)
        for y in range(buf.height)
        for x in range(buf.width)
        if buf.get_pixel(x, y) != background
    }

class RecordingWriter:
    """Writer stand-in that logs every pixel it is asked to write."""

    def __init__(self) -> None:
        self.writes: list[tuple[Point, float]] = []

    def hline(self, x0: int, x1: int, y: int) -> None:
        for x in range(x0, x1 + 1):
            self.writes.append(((x, y), 1.0))

    def vline(self, x: int, y0: int, y1: int) -> None:
        for y in range(y0, y1 + 1):
            self.writes.append(((x, y), 1.0))

    def pixel(self, x: int, y: int, coverage: float = 1.0) -> None:
        self.writes.append(((x, y), coverage))

    def coverage(self) -> dict[Point, float]:
        return dict(self.writes)

    def duplicates(self) -> list[Point]:
        seen: set[Point] = set()
        dupes = []
        for point, _ in self.writes:
            if point in seen:
                dupes.append(point)
            seen.add(point)
        return dupes
