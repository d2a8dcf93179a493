from .archive import pack_directory, remove_entry
from .publisher import ArtifactHandler

__all__ = ["ArtifactHandler", "pack_directory", "remove_entry"]
