"""archsetup - Arch Linux desktop provisioning from a package list."""

__version__ = "0.1.0"
