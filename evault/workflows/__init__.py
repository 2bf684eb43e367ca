from evault.workflows.upload import UploadWorkflow, UploadState
from evault.workflows.download import DownloadWorkflow, DownloadState, DownloadedFile
from evault.workflows.files import delete_file, list_files, generate_keys

__all__ = [
    "UploadWorkflow",
    "UploadState",
    "DownloadWorkflow",
    "DownloadState",
    "DownloadedFile",
    "delete_file",
    "list_files",
    "generate_keys",
]
