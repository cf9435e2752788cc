"""
Geometric primitives for the crop kernel.

Provides tuple-based 3D vector math, planes with point projection, affine
transforms (Revit Transform semantics) and integer axis-aligned rectangles
used to measure sheet overlap.
"""

import math


# ============================================================
# 3D VECTOR MATH (tuple-based)
# ============================================================

BASIS_X = (1.0, 0.0, 0.0)
BASIS_Y = (0.0, 1.0, 0.0)
BASIS_Z = (0.0, 0.0, 1.0)
ZERO = (0.0, 0.0, 0.0)


def v3(x, y, z):
    """Create a 3D vector as a tuple."""
    return (float(x), float(y), float(z))


def v_add(a, b):
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def v_sub(a, b):
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def v_mul(a, s):
    return (a[0] * s, a[1] * s, a[2] * s)


def v_dot(a, b):
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def v_cross(a, b):
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def v_len(a):
    """Length (magnitude) of a vector."""
    return math.sqrt(v_dot(a, a))


def v_norm(a):
    """Normalize a vector to unit length (zero vector stays zero)."""
    l = v_len(a)
    if l <= 1e-12:
        return (0.0, 0.0, 0.0)
    return (a[0] / l, a[1] / l, a[2] / l)


def v_dist(a, b):
    """Distance between two points."""
    return v_len(v_sub(a, b))


def xyz_to_v(p):
    """Convert Revit XYZ (or any 3-sequence) to a float tuple."""
    try:
        return (float(p.X), float(p.Y), float(p.Z))
    except AttributeError:
        return (float(p[0]), float(p[1]), float(p[2]))


# ============================================================
# PLANES
# ============================================================

class Plane:
    """Plane through `origin` with unit `normal`.

    The in-plane basis follows the right-hand rule (x_vec, y_vec, normal).
    A plane whose normal is the global Z axis uses the global X axis as
    x_vec, so sheet-space coordinates read back unchanged.

    Example:
        >>> p = Plane(BASIS_Z, (0.0, 0.0, 5.0))
        >>> project_onto(p, (1.0, 2.0, 9.0))
        (1.0, 2.0, 5.0)
        >>> p.to_local((1.0, 2.0, 9.0))
        (1.0, 2.0)
    """

    def __init__(self, normal, origin):
        n = v_norm(v3(*normal))
        if n == ZERO:
            raise ValueError("plane normal must be non-zero")
        self.normal = n
        self.origin = v3(*origin)

        if abs(abs(n[2]) - 1.0) <= 1e-9:
            x_vec = BASIS_X
        else:
            x_vec = v_norm(v_cross(BASIS_Z, n))
        self.x_vec = x_vec
        self.y_vec = v_cross(n, x_vec)

    def signed_distance(self, point):
        """Signed distance of `point` from the plane along the normal."""
        return v_dot(v_sub(point, self.origin), self.normal)

    def to_local(self, point):
        """In-plane (u, v) coordinates of `point` (projection implied)."""
        d = v_sub(point, self.origin)
        return (v_dot(d, self.x_vec), v_dot(d, self.y_vec))

    def __repr__(self):
        return f"Plane(normal={self.normal}, origin={self.origin})"


def create_plane(normal, origin):
    """Plane factory mirroring Plane.CreateByNormalAndOrigin."""
    return Plane(normal, origin)


def project_onto(plane, point):
    """Project `point` onto `plane` along the plane normal.

    Returns:
        The projected point in the same (model) frame as the input.
    """
    p = v3(*point)
    return v_sub(p, v_mul(plane.normal, plane.signed_distance(p)))


# ============================================================
# TRANSFORMS
# ============================================================

class Transform:
    """Affine transform: origin plus three basis vectors (column form).

    of_point(p) = origin + p.x * basis_x + p.y * basis_y + p.z * basis_z
    """

    def __init__(self, origin=ZERO, basis_x=BASIS_X, basis_y=BASIS_Y, basis_z=BASIS_Z):
        self.origin = v3(*origin)
        self.basis_x = v3(*basis_x)
        self.basis_y = v3(*basis_y)
        self.basis_z = v3(*basis_z)

    @classmethod
    def identity(cls):
        return cls()

    @classmethod
    def translation(cls, offset):
        return cls(origin=offset)

    def of_vector(self, v):
        return v_add(
            v_add(v_mul(self.basis_x, v[0]), v_mul(self.basis_y, v[1])),
            v_mul(self.basis_z, v[2]),
        )

    def of_point(self, p):
        return v_add(self.origin, self.of_vector(p))

    def multiply(self, other):
        """Composition `self * other`: applies `other` first, then `self`."""
        return Transform(
            origin=self.of_point(other.origin),
            basis_x=self.of_vector(other.basis_x),
            basis_y=self.of_vector(other.basis_y),
            basis_z=self.of_vector(other.basis_z),
        )

    def determinant(self):
        return v_dot(self.basis_x, v_cross(self.basis_y, self.basis_z))

    def inverse(self):
        """Inverse transform.

        Raises:
            ValueError: if the basis is singular.
        """
        det = self.determinant()
        if abs(det) <= 1e-12:
            raise ValueError("transform is not invertible")

        # Rows of the inverse linear part
        r0 = v_mul(v_cross(self.basis_y, self.basis_z), 1.0 / det)
        r1 = v_mul(v_cross(self.basis_z, self.basis_x), 1.0 / det)
        r2 = v_mul(v_cross(self.basis_x, self.basis_y), 1.0 / det)

        inv = Transform(
            basis_x=(r0[0], r1[0], r2[0]),
            basis_y=(r0[1], r1[1], r2[1]),
            basis_z=(r0[2], r1[2], r2[2]),
        )
        inv.origin = v_mul(inv.of_vector(self.origin), -1.0)
        return inv

    def to_dict(self):
        return {
            "origin": list(self.origin),
            "basis_x": list(self.basis_x),
            "basis_y": list(self.basis_y),
            "basis_z": list(self.basis_z),
        }

    def __repr__(self):
        return (
            f"Transform(origin={self.origin}, basis_x={self.basis_x}, "
            f"basis_y={self.basis_y}, basis_z={self.basis_z})"
        )


# ============================================================
# AXIS-ALIGNED INTEGER RECTANGLES
# ============================================================

class AxisRect:
    """Axis-aligned integer rectangle (x, y, width, height).

    Width and height are clamped to be non-negative; a rectangle with zero
    width or height is empty.

    Example:
        >>> a = AxisRect(0, 0, 100, 100)
        >>> b = AxisRect(50, 50, 100, 100)
        >>> a.intersect(b)
        AxisRect(x=50, y=50, w=50, h=50)
        >>> a.intersect(b).area()
        2500
    """

    def __init__(self, x, y, width, height):
        self.x = int(x)
        self.y = int(y)
        self.width = max(0, int(width))
        self.height = max(0, int(height))

    @classmethod
    def from_extents(cls, x0, y0, x1, y1):
        """Build from two corners in any order."""
        xmin, xmax = min(x0, x1), max(x0, x1)
        ymin, ymax = min(y0, y1), max(y0, y1)
        return cls(xmin, ymin, xmax - xmin, ymax - ymin)

    @property
    def right(self):
        return self.x + self.width

    @property
    def top(self):
        return self.y + self.height

    @property
    def empty(self):
        return self.width == 0 or self.height == 0

    def area(self):
        return self.width * self.height

    def intersect(self, other):
        """Standard rectangle intersection; empty rectangle when disjoint."""
        x0 = max(self.x, other.x)
        x1 = min(self.right, other.right)
        y0 = max(self.y, other.y)
        y1 = min(self.top, other.top)
        if x1 < x0 or y1 < y0:
            return AxisRect(0, 0, 0, 0)
        return AxisRect(x0, y0, x1 - x0, y1 - y0)

    def __eq__(self, other):
        if not isinstance(other, AxisRect):
            return NotImplemented
        return (self.x, self.y, self.width, self.height) == (
            other.x, other.y, other.width, other.height
        )

    def __hash__(self):
        return hash((self.x, self.y, self.width, self.height))

    def __repr__(self):
        return f"AxisRect(x={self.x}, y={self.y}, w={self.width}, h={self.height})"
