"""
Kakurasu Rules Engine - Core Package
Fields, board index, constraints, move history, level generation and the game controller.
"""
from .types import FieldStatus, Move
from .field import Field
from .board import Board, PlacedField
from .constraints import ConstraintCache, get_weight
from .commands import MoveHistory
from .generator import LevelConfig, LevelGenerator, generate_level
from .game import Game

__all__ = ['FieldStatus', 'Move', 'Field', 'Board', 'PlacedField', 'ConstraintCache', 'get_weight',
           'MoveHistory', 'LevelConfig', 'LevelGenerator', 'generate_level', 'Game']
