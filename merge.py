from typing import NamedTuple
from collections.abc import Sequence

from core import Circle, DrawCommand, CIRCLE_COUNT
from core import COLOR_ORIGINAL, COLOR_FIRST_MERGE, COLOR_SECOND_MERGE


# ==================== Pairwise merge ====================
def merge_circles(a: Circle, b: Circle) -> Circle:
    """
    Smallest circle covering both `a` and `b`.

    If the smaller circle already lies inside the bigger one, the bigger one is
    returned unchanged. Otherwise the far edges of both circles along the line
    of centers become antipodal points of the result.
    """
    if a.radius > b.radius:
        big, small = a, b
    else:
        big, small = b, a
    delta = small.center - big.center
    d = abs(delta)
    # concentric circles end at the containment test, d == 0 only gets past it with a NaN radius
    if d + small.radius <= big.radius or d == 0:
        return big
    radius = (d + big.radius + small.radius) / 2
    center = big.center + delta / d * (radius - big.radius)
    return Circle(center, radius)


# ==================== Three circles reduction ====================
# (first, second, last): first two merge, then the last one joins
PERMUTATIONS = (
    (0, 1, 2),
    (0, 2, 1),
    (1, 0, 2),
    (1, 2, 0),
    (2, 0, 1),
    (2, 1, 0),
)
# Only 3 circles are supported. More would need itertools.permutations here,
# with N! orderings to merge.


class MergeStage(NamedTuple):
    order: tuple[int, int, int]
    first: Circle
    second: Circle


def _check_circle_set(circles: Sequence[Circle]) -> None:
    if len(circles) != CIRCLE_COUNT:
        raise ValueError("Expected %d circles, got %d" % (CIRCLE_COUNT, len(circles)))


def merge_stages(circles: Sequence[Circle]) -> list[MergeStage]:
    """both merge results of every ordering, in PERMUTATIONS order"""
    _check_circle_set(circles)
    stages = []
    for first, second, last in PERMUTATIONS:
        merged1 = merge_circles(circles[first], circles[second])
        merged2 = merge_circles(merged1, circles[last])
        stages.append(MergeStage((first, second, last), merged1, merged2))
    return stages


def reduce_circles(circles: Sequence[Circle], show_first: bool, show_second: bool) -> list[DrawCommand]:
    """
    Merge the three circles in every ordering and emit the intermediate results.

    @param circles: exactly three circles
    @param show_first: emit the first merge of each ordering (green)
    @param show_second: emit the second merge of each ordering (red)
    @return: draw commands, first merge before second merge for each ordering
    """
    commands = []
    # all 12 merges are computed whatever the flags are
    for stage in merge_stages(circles):
        if show_first:
            commands.append(DrawCommand(stage.first, COLOR_FIRST_MERGE))
        if show_second:
            commands.append(DrawCommand(stage.second, COLOR_SECOND_MERGE))
    return commands


def build_scene(circles: Sequence[Circle], show_first: bool, show_second: bool) -> list[DrawCommand]:
    """original circles in blue, then the merge annotations"""
    commands = [DrawCommand(c, COLOR_ORIGINAL) for c in circles]
    commands.extend(reduce_circles(circles, show_first, show_second))
    return commands


def best_covering_circle(circles: Sequence[Circle]) -> Circle:
    """tightest second merge among all orderings, not necessarily the optimum"""
    best = None
    for stage in merge_stages(circles):
        if best is None or stage.second.radius < best.radius:
            best = stage.second
    return best


if __name__ == "__main__":
    from core import INITIAL_CIRCLES, format_circle
    for stage in merge_stages(INITIAL_CIRCLES):
        print(stage.order, format_circle(stage.first), format_circle(stage.second))
    print("best:", format_circle(best_covering_circle(INITIAL_CIRCLES)))
