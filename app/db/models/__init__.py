from .game import Game
from .enums import PlatformEnum
