"""
robustgeom Example: Convex hull on fixed-width integers

This example shows why exact predicates matter:
1. Build a point cloud in int8 that touches the dtype limits
2. Show that the naive cross product wraps around
3. Compute the hull with robustgeom and check every point is covered

Perfect for: seeing the overflow problem and its fix side by side
"""

import numpy as np

from robustgeom import Orientation, configure_logging, convex_hull, orient


def naive_orient(p, q, r):
    # Cross product evaluated in the points' own dtype (wraps on overflow)
    with np.errstate(over='ignore'):
        d = (q[0] - p[0]) * (r[1] - p[1]) - (q[1] - p[1]) * (r[0] - p[0])
    return Orientation.from_sign(int(d > 0) - int(d < 0))


def main():
    configure_logging('DEBUG')
    print("=" * 60)
    print("robustgeom Example: fixed-width convex hull")
    print("=" * 60)

    # Step 1: an int8 cloud with the four extreme corners
    print("\n[1] Building int8 point cloud...")
    rng = np.random.default_rng(0)
    cloud = rng.integers(-100, 100, size=(200, 2), dtype=np.int8)
    corners = np.array([[-128, -128], [127, -128], [127, 127], [-128, 127]], dtype=np.int8)
    points = np.vstack([cloud, corners])
    print(f"  {len(points)} points, dtype={points.dtype}")

    # Step 2: naive versus exact orientation on an extreme triple
    print("\n[2] Orientation of (-128,-128) -> (127,-128) -> (127,127)...")
    p, q, r = corners[0], corners[1], corners[2]
    print(f"  naive (wrapping) : {naive_orient(p, q, r).name}")
    print(f"  robustgeom       : {orient(p, q, r).name}")

    # Step 3: hull
    print("\n[3] Computing convex hull...")
    hull = convex_hull(points)
    print(f"  hull vertices: {[tuple(int(c) for c in v) for v in hull]}")
    outside = [tuple(row) for row in points if not hull.contains(row)]
    print(f"  points outside hull: {len(outside)}")

    print("\n" + "=" * 60)
    print("Done")
    print("=" * 60)


if __name__ == "__main__":
    main()
