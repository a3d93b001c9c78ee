# core/errors.py


class TracingError(Exception):
    """Base class for errors raised by the tracer."""


class SceneConstructionError(TracingError, ValueError):
    """
    A scene-build precondition was violated (empty BVH input, a child
    without a bounding box, inverted extents, ...). Raised while the scene
    graph is assembled, never during rendering.
    """
