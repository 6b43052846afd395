from discountcalc.capabilities.protocol import Clipboard, ShareTarget
from discountcalc.capabilities.adapters import CallbackShareTarget, MemoryClipboard
from discountcalc.capabilities.module import CapabilitiesModule

__all__ = [
    "CallbackShareTarget",
    "CapabilitiesModule",
    "Clipboard",
    "MemoryClipboard",
    "ShareTarget",
]
