import numpy as np
from numpy import asarray, zeros, isfinite, roll, vstack

class InvalidInput(ValueError):
    "points that cannot be read as finite 2D coordinates"

def as_points(points):
    """Returns a fresh float (N,2) array of the xy coordinates of points.
    Extra columns (z) are dropped."""
    try:
        pts = np.array(points, dtype=float)
    except (TypeError, ValueError) as err:
        raise InvalidInput("points must be numeric coordinates: %s" % err) from err
    if pts.size == 0:
        return zeros([0, 2])
    if pts.ndim != 2 or pts.shape[1] < 2:
        raise InvalidInput("expected (N,2) points, got shape %s" % (pts.shape,))
    pts = np.array(pts[:, 0:2])
    if not isfinite(pts).all():
        raise InvalidInput("points must have finite coordinates")
    return pts

def determinant(p, q, r):
    "return (q-p) x (r-p); positive when p,q,r turn left (counter-clockwise)"
    p, q, r = asarray(p, dtype=float), asarray(q, dtype=float), asarray(r, dtype=float)
    return ((q[...,0]-p[...,0]) * (r[...,1]-p[...,1]) -
            (q[...,1]-p[...,1]) * (r[...,0]-p[...,0]))

def edges(polygon):
    "return the polygon's edges as vertex pairs, closing last to first"
    polygon = asarray(polygon)
    n = len(polygon)
    if n < 2:
        return []
    if n == 2:
        return [(polygon[0], polygon[1])]
    return [(polygon[i], polygon[(i+1) % n]) for i in range(n)]

def closed(polygon):
    "return the polygon's vertices with the first one repeated at the end"
    polygon = as_points(polygon)
    if len(polygon) == 0:
        return polygon
    return vstack([polygon, polygon[0:1]])

def is_convex(polygon, strict=True):
    """true if every consecutive (wrapping) vertex triple turns left;
    with strict=False straight (collinear) triples are allowed too"""
    polygon = as_points(polygon)
    if len(polygon) < 3:
        return True
    turns = determinant(polygon, roll(polygon, -1, axis=0), roll(polygon, -2, axis=0))
    if strict:
        return bool((turns > 0).all())
    return bool((turns >= 0).all())

def contains(polygon, points, tol=0.0):
    """Tests points against a counter-clockwise convex polygon.

    Points on the boundary count as inside; 'tol' widens the boundary to
    absorb rounding.  A single (x, y) point returns a bool, a sequence
    of points returns a boolean array.  Polygons with fewer than three
    vertices are treated as a segment or a single point."""
    single = np.ndim(points) == 1 and len(points) > 0
    polygon = as_points(polygon)
    pts = as_points(np.atleast_2d(points) if single else points)

    n = len(polygon)
    if n == 0:
        inside = zeros(len(pts), dtype=bool)
    elif n == 1:
        inside = (np.abs(pts - polygon[0]) <= tol).all(axis=1)
    elif n == 2:
        a, b = polygon
        ab, ap = b - a, pts - a
        along = ap @ ab
        inside = ((np.abs(determinant(a, b, pts)) <= tol) &
                  (along >= -tol) & (along <= ab @ ab + tol))
    else:
        inside = np.ones(len(pts), dtype=bool)
        for a, b in edges(polygon):
            inside &= determinant(a, b, pts) >= -tol

    if single:
        return bool(inside[0])
    return inside

def area(polygon):
    "return the signed (shoelace) area; positive for counter-clockwise"
    polygon = as_points(polygon)
    if len(polygon) < 3:
        return 0.0
    x, y = polygon[:,0], polygon[:,1]
    return float(0.5 * np.sum(x*roll(y, -1) - roll(x, -1)*y))
