"""On-screen gamepad state viewer drawn over a video image panel."""

__version__ = "0.1.0"
__all__ = ["controls", "scene", "frames", "app"]