"""Glue between logical element coordinates and a drawing backend."""
from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, List, Mapping, Optional, Sequence, Tuple

from chart_elements.backend import BackendCoord, DrawingBackend
from chart_elements.logging_utils import LOGGER_NAME

_LOGGER = logging.getLogger(LOGGER_NAME)

Projector = Callable[[Any], Optional[BackendCoord]]
TraceCallback = Callable[[str, Mapping[str, Any]], None]


def scaled_projector(
    scale_x: float,
    scale_y: float,
    *,
    offset_x: float = 0.0,
    offset_y: float = 0.0,
    bounds: Optional[Tuple[int, int]] = None,
) -> Projector:
    """Return a projector for ``(x, y)`` logical pairs.

    Points are scaled, offset and rounded to device pixels. When ``bounds``
    (width, height) is given, points landing outside ``[0, width) x [0,
    height)`` project to ``None`` so callers treat them as clipped.
    """

    def project(coord: Any) -> Optional[BackendCoord]:
        x = int(round(float(coord[0]) * scale_x + offset_x))
        y = int(round(float(coord[1]) * scale_y + offset_y))
        if bounds is not None:
            width, height = bounds
            if x < 0 or y < 0 or x >= width or y >= height:
                return None
        return x, y

    return project


def project_points(element: Any, project: Projector) -> List[BackendCoord]:
    projected: List[BackendCoord] = []
    for coord in element.point_iter():
        point = project(coord)
        if point is None:
            _LOGGER.debug("Skipping clipped point %r of %s", coord, type(element).__name__)
            continue
        projected.append(point)
    return projected


def draw_element(
    element: Any,
    project: Projector,
    backend: DrawingBackend,
    parent_dim: Tuple[int, int],
    *,
    trace: Optional[TraceCallback] = None,
) -> None:
    """Project ``element``'s logical points and draw it on ``backend``."""
    projected = project_points(element, project)
    if trace:
        trace(
            "draw_element:projected",
            {
                "element": type(element).__name__,
                "points": list(projected),
                "parent_dim": parent_dim,
            },
        )
    element.draw(iter(projected), backend, parent_dim)


def draw_elements(
    elements: Iterable[Any],
    project: Projector,
    backend: DrawingBackend,
    parent_dim: Tuple[int, int],
    *,
    stop_on_error: bool = True,
    trace: Optional[TraceCallback] = None,
) -> Sequence[Tuple[Any, Exception]]:
    """Draw ``elements`` in order on a single backend.

    With ``stop_on_error`` the first backend failure is re-raised as-is.
    Otherwise failures are logged, collected and returned so the rest of the
    render goes ahead.
    """
    failures: List[Tuple[Any, Exception]] = []
    for element in elements:
        try:
            draw_element(element, project, backend, parent_dim, trace=trace)
        except Exception as exc:
            if stop_on_error:
                raise
            _LOGGER.warning("Failed to draw %s: %s", type(element).__name__, exc)
            failures.append((element, exc))
    return failures
