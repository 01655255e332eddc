from modulepreload.loader.filesystem import FileSystemModuleLoader
from modulepreload.loader.memory import InMemoryModuleLoader

__all__ = [
    "FileSystemModuleLoader",
    "InMemoryModuleLoader",
]
