"""Interactive application around the verification screen."""

from .keys import Command, KeyReader, decode_key
from .viewer import ViewerApp

__all__ = ["Command", "KeyReader", "ViewerApp", "decode_key"]
