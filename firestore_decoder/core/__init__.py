from .base import DecoderFlavor
from .flavors import ClassicFlavor, ExpFlavor, LiteFlavor, flavor_for
from .writer import UserDataWriter, create_writer, writer_from_config

__all__ = [
    "DecoderFlavor",
    "ClassicFlavor",
    "ExpFlavor",
    "LiteFlavor",
    "flavor_for",
    "UserDataWriter",
    "create_writer",
    "writer_from_config",
]
