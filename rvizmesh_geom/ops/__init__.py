from .winding import signed_area2, is_clockwise, reverse_winding
from .vectors import cross_product, face_normal, normalize_normals

__all__ = [
    "signed_area2",
    "is_clockwise",
    "reverse_winding",
    "cross_product",
    "face_normal",
    "normalize_normals",
]
