from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional

import numpy as np

from .grid import GameGrid
from .kicks import resolve_rotation
from .pieces import Piece, TetrominoType
from .rules import ScoringRules

logger = logging.getLogger(__name__)


class Action(IntEnum):
    LEFT = 0
    RIGHT = 1
    ROTATE = 2
    SOFT_DROP = 3
    PAUSE = 4
    NONE = 5


class GameStatus(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass
class GameConfig:
    width: int = 10
    height: int = 20
    random_seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {self.width}x{self.height}")


@dataclass
class GameState:
    grid: GameGrid
    next_kind: TetrominoType
    piece: Optional[Piece] = None
    score: int = 0
    lines_cleared: int = 0
    level: int = 1
    drop_interval_ms: int = 1000
    drop_counter_ms: float = 0.0
    paused: bool = False
    game_over: bool = False


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of a game handed to renderers and agents."""

    grid: np.ndarray = field(compare=False)
    piece: Optional[Piece]
    next_kind: TetrominoType
    score: int
    level: int
    lines_cleared: int
    drop_interval_ms: int
    is_paused: bool
    is_game_over: bool


class TrisGame:
    """Rules engine for a single session of the falling-block game.

    All state lives in one `GameState`. Commands are ignored while the game is
    paused or over, except `resume` and `reset`. Rejected moves and rotations
    leave the state untouched.
    """

    def __init__(self, config: Optional[GameConfig] = None, rules: Optional[ScoringRules] = None) -> None:
        self.config = config or GameConfig()
        self.rules = rules or ScoringRules()
        self.rng = random.Random(self.config.random_seed)
        self.state: GameState
        self.reset()

    def _new_state(self) -> GameState:
        return GameState(
            grid=GameGrid(self.config.width, self.config.height),
            next_kind=self._random_kind(),
            drop_interval_ms=self.rules.drop_interval_for_level(1),
        )

    def reset(self, seed: Optional[int] = None) -> None:
        if seed is not None:
            self.rng.seed(seed)
        self.state = self._new_state()
        self._spawn_piece()
        logger.info("game reset")

    # ---------- Read-only accessors ----------
    @property
    def grid(self) -> np.ndarray:
        return self.state.grid.clone_state()

    @property
    def piece(self) -> Optional[Piece]:
        return self.state.piece

    @property
    def next_kind(self) -> TetrominoType:
        return self.state.next_kind

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def level(self) -> int:
        return self.state.level

    @property
    def lines_cleared(self) -> int:
        return self.state.lines_cleared

    @property
    def drop_interval_ms(self) -> int:
        return self.state.drop_interval_ms

    @property
    def is_paused(self) -> bool:
        return self.state.paused

    @property
    def is_game_over(self) -> bool:
        return self.state.game_over

    @property
    def status(self) -> GameStatus:
        if self.state.game_over:
            return GameStatus.GAME_OVER
        if self.state.paused:
            return GameStatus.PAUSED
        return GameStatus.RUNNING

    def snapshot(self) -> GameSnapshot:
        s = self.state
        return GameSnapshot(
            grid=s.grid.clone_state(),
            piece=s.piece,
            next_kind=s.next_kind,
            score=s.score,
            level=s.level,
            lines_cleared=s.lines_cleared,
            drop_interval_ms=s.drop_interval_ms,
            is_paused=s.paused,
            is_game_over=s.game_over,
        )

    # ---------- Piece lifecycle ----------
    def _random_kind(self) -> TetrominoType:
        return self.rng.choice(list(TetrominoType))

    def _spawn_piece(self) -> None:
        s = self.state
        piece = Piece.spawn(s.next_kind, s.grid.width)
        s.next_kind = self._random_kind()
        if s.grid.collide(piece):
            s.piece = None
            s.game_over = True
            logger.info("game over: score=%d lines=%d level=%d", s.score, s.lines_cleared, s.level)
            return
        s.piece = piece

    def _accepting_input(self) -> bool:
        s = self.state
        return not s.game_over and not s.paused and s.piece is not None

    def _lock_piece(self) -> None:
        s = self.state
        assert s.piece is not None
        s.grid.merge(s.piece)
        lines = s.grid.sweep()
        if lines:
            s.score += self.rules.score_for_lines(lines, s.level)
            s.lines_cleared += lines
            level = self.rules.level_for_lines(s.lines_cleared)
            if level != s.level:
                logger.debug("level up: %d -> %d", s.level, level)
            s.level = level
            s.drop_interval_ms = self.rules.drop_interval_for_level(level)
        logger.debug("locked %s at (%d, %d), cleared %d", s.piece.name, s.piece.x, s.piece.y, lines)
        s.drop_counter_ms = 0.0
        self._spawn_piece()

    # ---------- Commands ----------
    def move(self, direction: int) -> bool:
        if direction not in (-1, 1):
            raise ValueError(f"direction must be -1 or 1, got {direction!r}")
        if not self._accepting_input():
            return False
        s = self.state
        candidate = s.piece.moved(direction, 0)
        if s.grid.collide(candidate):
            return False
        s.piece = candidate
        return True

    def rotate(self) -> bool:
        if not self._accepting_input():
            return False
        s = self.state
        rotated = resolve_rotation(s.grid, s.piece)
        if rotated is None:
            return False
        s.piece = rotated
        return True

    def drop(self) -> bool:
        """Move the piece down one row; lock it if it can't move.

        Returns True when the piece moved and False when it settled (or when
        the game isn't accepting input).
        """
        if not self._accepting_input():
            return False
        s = self.state
        candidate = s.piece.moved(0, 1)
        if s.grid.collide(candidate):
            self._lock_piece()
            return False
        s.piece = candidate
        s.drop_counter_ms = 0.0
        return True

    def advance(self, delta_ms: float) -> None:
        if delta_ms < 0:
            raise ValueError(f"delta_ms must be non-negative, got {delta_ms!r}")
        if not self._accepting_input():
            return
        s = self.state
        s.drop_counter_ms += delta_ms
        if s.drop_counter_ms > s.drop_interval_ms:
            self.drop()
            s.drop_counter_ms = 0.0

    def pause(self) -> None:
        if self.state.game_over:
            return
        self.state.paused = True

    def resume(self) -> None:
        # Time delivered while paused was discarded, so nothing catches up here.
        if self.state.game_over:
            return
        self.state.paused = False

    def toggle_pause(self) -> None:
        if self.state.paused:
            self.resume()
        else:
            self.pause()

    def step(self, action: Action) -> None:
        if action == Action.LEFT:
            self.move(-1)
        elif action == Action.RIGHT:
            self.move(1)
        elif action == Action.ROTATE:
            self.rotate()
        elif action == Action.SOFT_DROP:
            self.drop()
        elif action == Action.PAUSE:
            self.toggle_pause()
        elif action == Action.NONE:
            pass

    def get_state(self) -> np.ndarray:
        # Overlay current piece on a copy of the grid for observation
        state = self.state.grid.clone_state()
        piece = self.state.piece
        if piece is not None and not self.state.game_over:
            for x, y in piece.cells():
                if 0 <= y < self.state.grid.height and 0 <= x < self.state.grid.width:
                    # Use negative to indicate falling piece overlay
                    state[y, x] = -int(piece.kind)
        return state
