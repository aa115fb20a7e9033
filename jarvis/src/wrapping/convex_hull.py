import numpy as np
from numpy import flatnonzero, hypot, inf
from .misc import as_points, determinant
from .misc import InvalidInput  # @UnusedImport

COLLINEAR = 1e-12  # relative determinant below which three points count as collinear

def theta(p1, p2):
    """Returns the pseudo-angle [degrees, 0..360) of the direction p1->p2.

    Implements the theta function from Sedgewick's Algorithms: the L1
    normalized dy, remapped per quadrant.  It orders directions exactly
    like atan2 without the trigonometry.  p2 may be one point or an
    (N,2) array of points; z coordinates are ignored."""
    p1 = np.asarray(p1, dtype=float)
    p2 = np.asarray(p2, dtype=float)
    single = p2.ndim == 1
    p2 = np.atleast_2d(p2)

    dx = p2[:,0] - p1[0]
    dy = p2[:,1] - p1[1]
    l1 = np.abs(dx) + np.abs(dy)
    t = np.divide(dy, l1, out=np.zeros_like(l1), where=l1 != 0)
    t = np.where(dx < 0, 2 - t, np.where(dy < 0, 4 + t, t))
    angle = t * 90.0
    if single:
        return float(angle[0])
    return angle

def _confirm(hull, placed, nxt):
    """Returns the candidate with no unplaced point strictly right of the
    edge hull[placed]->candidate, scanning from the angular winner nxt.
    Collinear points further along replace it, except once the scan
    holds the wrap-around copy of the anchor (last slot)."""
    n = len(hull) - 1
    here = hull[placed]
    for r in range(placed+1, n+1):
        if r == nxt:
            continue
        ahead, there = hull[nxt] - here, hull[r] - here
        turn = determinant(here, hull[nxt], hull[r])
        slack = COLLINEAR * hypot(ahead[0], ahead[1]) * hypot(there[0], there[1])
        if turn < -slack:
            nxt = r
        elif turn <= slack and nxt != n:
            if np.dot(ahead, there) > 0 and np.dot(there, there) > np.dot(ahead, ahead):
                nxt = r
    return nxt

def hull(points, debug=False):
    """Given a sequence or (N,2) array of points, returns the convex hull
    array, counter-clockwise from the (first) bottom-most point.

    Gift wrapping: from each hull vertex take the candidate with the
    smallest pseudo-angle above the previous edge's angle, the farthest
    one on equal angles, then confirm it with the orientation
    determinant so rounding in the angles cannot drop a vertex.
    Duplicates are dropped.  Raises InvalidInput for non-finite
    coordinates."""
    pts = as_points(points)
    if np.shape(pts)[0] == 0:
        return pts

    # drop duplicates, keeping first occurrences in input order
    # (+0.0 folds -0.0 into 0.0 so they compare equal bytewise)
    pts = pts + 0.0
    _, first = np.unique(pts, axis=0, return_index=True)
    pts = pts[np.sort(first)]
    n = np.shape(pts)[0]

    # swap (first) bottom-most point to position zero, copy it to the end
    # as the wrap-around target
    hull = np.empty([n+1, 2])
    hull[:n] = pts
    idx = np.argmin(pts[:,1])
    hull[n] = pts[idx]
    hull[0],hull[idx] = hull[idx],np.copy(hull[0])

    placed = 0    # hull[0:placed+1] are vertices, hull[placed] is current
    sweep = None  # angle of the edge into the current vertex
    while placed < n:
        vecs = hull[placed+1:] - hull[placed]
        angle = theta(hull[placed], hull[placed+1:])
        dist = hypot(vecs[:,0], vecs[:,1])
        angle[dist == 0] = inf
        if sweep is not None:
            angle[angle <= sweep] = inf
        best = np.min(angle)
        if best < inf:
            nxt = flatnonzero(angle == best)[::-1]  # major key: minimum angle
            nxt = nxt[np.argmax(dist[nxt])]         # minor key: maximum distance
            nxt = nxt + placed + 1
        elif sweep is None:
            break   # single point
        else:
            nxt = n # closing edge runs back along the bottom edge, or every
                    # angle rounded below the sweep: start from the anchor
        nxt = _confirm(hull, placed, nxt)
        if debug:
            print("step=%d: from (%g, %g) angle=%g to (%g, %g)" %
                  (placed, hull[placed,0], hull[placed,1], best,
                   hull[nxt,0], hull[nxt,1]))
        if nxt == n:
            break
        placed = placed + 1
        hull[placed],hull[nxt] = hull[nxt],np.copy(hull[placed])
        sweep = theta(hull[placed-1], hull[placed])
    return np.copy(hull[:placed+1])
