from .build_app import build_hostel_app, build_placement_app

__all__ = [
    "build_hostel_app",
    "build_placement_app",
]
