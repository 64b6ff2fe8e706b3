from boardshop.application.ports.file_storage import FileStoragePort

__all__ = ["FileStoragePort"]
