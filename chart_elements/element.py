"""Contracts that let the chart layer treat every element uniformly."""
from __future__ import annotations

from typing import Generic, Iterable, Tuple, TypeVar

from chart_elements.backend import BackendCoord, DrawingBackend

Coord = TypeVar("Coord")


class PointCollection(Generic[Coord]):
    """Exposes the logical coordinates owned by an element."""

    def point_iter(self) -> Tuple[Coord, ...]:
        raise NotImplementedError


class Drawable:
    """Renders an element once its logical points are projected to pixels."""

    def draw(
        self,
        points: Iterable[BackendCoord],
        backend: DrawingBackend,
        parent_dim: Tuple[int, int],
    ) -> None:
        """Issue backend calls for ``points``.

        ``points`` follows the order of ``point_iter()``. Points the caller
        clipped away are simply missing, so an element must draw nothing
        rather than partial geometry when its point is absent.
        """
        raise NotImplementedError
