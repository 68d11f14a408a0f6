from .dispatcher import Dispatcher, text_result
from .loader import load_tools

__all__ = ["Dispatcher", "load_tools", "text_result"]
