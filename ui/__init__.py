"""
UI模块
提供终端界面显示
"""

from .protocol import GameDisplay, GameInput, GameUI
from .text_view import TextView

__all__ = ['GameDisplay', 'GameInput', 'GameUI', 'TextView']
