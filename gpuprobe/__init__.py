"""GPU name tables, DRM fdinfo accounting, kernel notices and Linux process information."""

__version__ = "0.1.0"
__all__ = ["amdgpu_ids", "msm_ids", "info_messages", "process_info", "fdinfo"]