"""Instance provisioning domain exports."""

from .artifact_download import Downloader, download_file
from .instance_layout import InstanceLayout, ensure_directory, reset_directory
from .instance_provisioner import ProvisionedInstance, provision_instance
from .pack_sources import PackSource, copy_pack, pack_sources_from_arguments, stage_packs
from .provisioning_errors import (
    ConfigWriteError,
    DirectoryCreateError,
    DownloadFailedError,
    InvalidPackPathError,
    PackCopyError,
    ProvisioningError,
)
from .server_properties import SERVER_PROPERTIES, write_server_properties

__all__ = [
    "Downloader",
    "download_file",
    "InstanceLayout",
    "ensure_directory",
    "reset_directory",
    "ProvisionedInstance",
    "provision_instance",
    "PackSource",
    "copy_pack",
    "pack_sources_from_arguments",
    "stage_packs",
    "ConfigWriteError",
    "DirectoryCreateError",
    "DownloadFailedError",
    "InvalidPackPathError",
    "PackCopyError",
    "ProvisioningError",
    "SERVER_PROPERTIES",
    "write_server_properties",
]
