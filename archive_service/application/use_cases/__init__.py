from .create_archive import CreateArchiveUseCase

__all__ = [
    "CreateArchiveUseCase",
]
