from .stager import ResourceStager, ensure_mappings

__all__ = ["ResourceStager", "ensure_mappings"]
