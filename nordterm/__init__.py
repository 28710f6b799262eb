"""Nord theme provisioning for GNOME Terminal.

Clones the default GNOME Terminal profile and writes the Nord color palette
into the new profile's dconf namespace.
"""

__version__ = "0.1.0"
