"""Core provisioning logic for archsetup."""
